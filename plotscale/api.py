from __future__ import annotations

from collections.abc import Sequence
import math

from plotscale.errors import ScaleConfigError
from plotscale.position import DEFAULT_EXPAND, X_AESTHETICS, Y_AESTHETICS, LabelSpec, PositionDiscreteScale


def scale_x_discrete(
    name: str | None = None,
    *,
    expand: Sequence[float] = DEFAULT_EXPAND,
    limits: Sequence[str] | None = None,
    labels: LabelSpec = None,
    drop: bool = False,
) -> PositionDiscreteScale:
    return PositionDiscreteScale(
        X_AESTHETICS,
        expand=validate_expand(expand),
        limits=limits,
        drop=drop,
        name=name,
        labels=labels,
    )


def scale_y_discrete(
    name: str | None = None,
    *,
    expand: Sequence[float] = DEFAULT_EXPAND,
    limits: Sequence[str] | None = None,
    labels: LabelSpec = None,
    drop: bool = False,
) -> PositionDiscreteScale:
    return PositionDiscreteScale(
        Y_AESTHETICS,
        expand=validate_expand(expand),
        limits=limits,
        drop=drop,
        name=name,
        labels=labels,
    )


def xlim(*levels: str) -> PositionDiscreteScale:
    if not levels:
        raise ScaleConfigError("xlim requires at least one level")
    return scale_x_discrete(limits=[str(level) for level in levels])


def ylim(*levels: str) -> PositionDiscreteScale:
    if not levels:
        raise ScaleConfigError("ylim requires at least one level")
    return scale_y_discrete(limits=[str(level) for level in levels])


def validate_expand(expand: Sequence[float]) -> tuple[float, float]:
    if isinstance(expand, (str, bytes)) or not hasattr(expand, "__len__") or len(expand) != 2:
        raise ScaleConfigError(f"expand must be a pair of numbers, got {expand!r}")
    out: list[float] = []
    for v in expand:
        if isinstance(v, bool):
            raise ScaleConfigError(f"expand entries must be numbers, got {v!r}")
        try:
            f = float(v)
        except (TypeError, ValueError) as exc:
            raise ScaleConfigError(f"expand entries must be numbers, got {v!r}") from exc
        if not math.isfinite(f):
            raise ScaleConfigError("expand entries must be finite")
        out.append(f)
    return (out[0], out[1])
