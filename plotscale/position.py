from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
import logging
from typing import Any, Union

import numpy as np

from plotscale.adapters import classify_values
from plotscale.ranges import ContinuousRange, DiscreteRange, Interval, expand_range, union_range
from plotscale.values import CategoricalBatch, NumericBatch


LOGGER = logging.getLogger(__name__)

X_AESTHETICS = ("x", "xmin", "xmax", "xend")
Y_AESTHETICS = ("y", "ymin", "ymax", "yend")
DEFAULT_EXPAND = (0.0, 0.5)

LabelSpec = Union[Mapping[str, str], Sequence[str], Callable[[str], str], None]


class PositionDiscreteScale:
    """Discrete position scale with a parallel continuous range.

    Categorical values sit at integer positions starting at one for the first
    level. Numeric values pass through unchanged, which lets geoms place
    objects between levels (jitter, labels between bars). The two ranges are
    trained independently and only combined by :meth:`dimension`.
    """

    legend = False

    def __init__(
        self,
        aesthetics: Sequence[str],
        *,
        expand: tuple[float, float] = DEFAULT_EXPAND,
        limits: Sequence[str] | None = None,
        drop: bool = False,
        name: str | None = None,
        labels: LabelSpec = None,
    ) -> None:
        self.aesthetics = tuple(aesthetics)
        self.expand = expand
        self._limits = _unique_limits(limits)
        self.drop = drop
        self.name = name
        self.labels = labels
        self.range = DiscreteRange()
        self.range_c = ContinuousRange()

    def __repr__(self) -> str:
        return (
            f"PositionDiscreteScale(aesthetics={self.aesthetics!r}, expand={self.expand!r}, "
            f"limits={self._limits!r}, drop={self.drop!r})"
        )

    @property
    def limits(self) -> tuple[str, ...] | None:
        """Explicit limits override, or ``None`` to use trained labels."""
        return self._limits

    @limits.setter
    def limits(self, value: Sequence[str] | None) -> None:
        self._limits = _unique_limits(value)

    def set_limits(self, value: Sequence[str] | None) -> None:
        self.limits = value

    def get_limits(self) -> tuple[str, ...]:
        if self._limits is not None:
            return self._limits
        return self.range.limits()

    def handles(self, aesthetic: str) -> bool:
        return aesthetic in self.aesthetics

    def train(self, values: Any) -> None:
        batch = classify_values(values, label=self.aesthetics[0])
        if isinstance(batch, CategoricalBatch):
            self.range.train(batch, drop=self.drop)
            LOGGER.debug("trained %s on %d categorical values -> %d levels", self.aesthetics[0], len(batch), len(self.range.limits()))
        else:
            self.range_c.train(batch)
            LOGGER.debug("trained %s on %d continuous values -> %s", self.aesthetics[0], len(batch), self.range_c.range())

    def map(self, values: Any) -> list[int | None] | np.ndarray:
        batch = classify_values(values, label=self.aesthetics[0])
        if isinstance(batch, NumericBatch):
            return self.map_continuous(batch)
        return self.map_discrete(batch)

    def map_discrete(self, batch: CategoricalBatch) -> list[int | None]:
        positions = {label: i for i, label in enumerate(self.get_limits(), start=1)}
        return [None if label is None else positions.get(label) for label in batch.labels]

    def map_continuous(self, batch: NumericBatch) -> np.ndarray:
        return batch.values.copy()

    def dimension(self, expand: tuple[float, float] | None = None) -> Interval | None:
        """Axis extent covering the padded discrete and continuous spans.

        Levels are one unit apart, so the discrete span ``[1, n]`` is padded by
        ``expand[1]`` level steps on both ends. The continuous span is padded
        by ``expand[0]`` below and ``expand[1]`` of its width above; a
        zero-width continuous span counts as one level step wide, so a single
        value is padded by ``expand[1]`` above rather than by a width taken
        from ``expand[1]`` itself.
        """
        outer, step = self.expand if expand is None else expand
        n = len(self.get_limits())
        disc = expand_range((1.0, float(n)), add=step) if n > 0 else None
        cont = expand_range(self.range_c.range(), mul=(0.0, step), add=(outer, 0.0))
        return union_range(disc, cont)

    def breaks(self) -> list[int]:
        return list(range(1, len(self.get_limits()) + 1))

    def break_labels(self) -> list[str]:
        limits = self.get_limits()
        label_spec = self.labels
        if label_spec is None:
            return list(limits)
        if callable(label_spec):
            return [str(label_spec(level)) for level in limits]
        if isinstance(label_spec, Mapping):
            return [str(label_spec.get(level, level)) for level in limits]
        given = list(label_spec)
        return [given[i] if i < len(given) else level for i, level in enumerate(limits)]

    def break_info(self) -> list[tuple[int, str]]:
        return list(zip(self.breaks(), self.break_labels(), strict=True))

    def clone(self) -> "PositionDiscreteScale":
        new = PositionDiscreteScale(
            self.aesthetics,
            expand=self.expand,
            limits=self._limits,
            drop=self.drop,
            name=self.name,
            labels=self.labels,
        )
        LOGGER.debug("cloned %s scale with empty ranges", self.aesthetics[0])
        return new

    def reset(self) -> None:
        self.range.reset()
        self.range_c.reset()


def _unique_limits(limits: Sequence[str] | None) -> tuple[str, ...] | None:
    if limits is None:
        return None
    # First occurrence keeps its position.
    return tuple(dict.fromkeys(limits))
