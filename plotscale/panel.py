from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import logging
from typing import Any

from plotscale.position import PositionDiscreteScale
from plotscale.ranges import Interval


LOGGER = logging.getLogger(__name__)


@dataclass
class PanelScales:
    """Position scales owned by a single panel.

    Layers are trained against the panel explicitly; facet panels get their
    own instance through :meth:`clone`.
    """

    x: PositionDiscreteScale | None = None
    y: PositionDiscreteScale | None = None

    def scales(self) -> list[PositionDiscreteScale]:
        return [s for s in (self.x, self.y) if s is not None]

    def scale_for(self, aesthetic: str) -> PositionDiscreteScale | None:
        for scale in self.scales():
            if scale.handles(aesthetic):
                return scale
        return None

    def train_layer(self, layer: Mapping[str, Any]) -> None:
        for aesthetic, values in layer.items():
            scale = self.scale_for(aesthetic)
            if scale is not None:
                scale.train(values)

    def map_layer(self, layer: Mapping[str, Any]) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for aesthetic, values in layer.items():
            scale = self.scale_for(aesthetic)
            out[aesthetic] = values if scale is None else scale.map(values)
        return out

    def dimensions(self) -> dict[str, Interval | None]:
        out: dict[str, Interval | None] = {}
        if self.x is not None:
            out["x"] = self.x.dimension()
        if self.y is not None:
            out["y"] = self.y.dimension()
        return out

    def clone(self) -> "PanelScales":
        LOGGER.debug("cloning panel scales (%d owned)", len(self.scales()))
        return PanelScales(
            x=None if self.x is None else self.x.clone(),
            y=None if self.y is None else self.y.clone(),
        )
