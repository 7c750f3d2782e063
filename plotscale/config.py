from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
import tomllib
from typing import Any

from plotscale.api import scale_x_discrete, scale_y_discrete, validate_expand
from plotscale.errors import ScaleConfigError
from plotscale.position import DEFAULT_EXPAND, PositionDiscreteScale


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScaleConfig:
    axis: str
    name: str | None = None
    expand: tuple[float, float] = DEFAULT_EXPAND
    limits: tuple[str, ...] | None = None
    drop: bool = False

    def build(self) -> PositionDiscreteScale:
        factory = scale_x_discrete if self.axis == "x" else scale_y_discrete
        return factory(self.name, expand=self.expand, limits=self.limits, drop=self.drop)


def load_scale_config(path: str | Path) -> ScaleConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"scale config not found: {config_path}")
    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ScaleConfigError(f"invalid TOML in {config_path}: {exc}") from exc
    config = parse_scale_config(raw)
    LOGGER.info("loaded %s-axis scale config from %s", config.axis, config_path)
    return config


def parse_scale_config(raw: dict[str, Any]) -> ScaleConfig:
    table = raw.get("scale")
    if not isinstance(table, dict):
        raise ScaleConfigError("config missing [scale] table")
    try:
        axis = table["axis"]
    except KeyError as exc:
        raise ScaleConfigError(f"scale config missing required field: {exc.args[0]}") from exc
    if axis not in ("x", "y"):
        raise ScaleConfigError(f"axis must be 'x' or 'y', got {axis!r}")
    drop = table.get("drop", False)
    if not isinstance(drop, bool):
        raise ScaleConfigError("drop must be a boolean")
    return ScaleConfig(
        axis=axis,
        name=_coerce_optional_str(table.get("name"), "name"),
        expand=validate_expand(table.get("expand", DEFAULT_EXPAND)),
        limits=_coerce_optional_string_tuple(table.get("limits"), "limits"),
        drop=drop,
    )


def _coerce_optional_str(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ScaleConfigError(f"{field_name} must be a string")
    return value


def _coerce_optional_string_tuple(value: Any, field_name: str) -> tuple[str, ...] | None:
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ScaleConfigError(f"{field_name} must be a list of strings")
    return tuple(value)
