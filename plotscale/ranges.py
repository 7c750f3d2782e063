from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from plotscale.errors import PlotScaleDataError
from plotscale.values import CategoricalBatch, NumericBatch


Interval = tuple[float, float]


@dataclass
class DiscreteRange:
    """Ordered set of observed categorical labels."""

    _labels: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self._labels

    def train(self, values: CategoricalBatch | Iterable[str | None], drop: bool = False) -> None:
        if isinstance(values, (str, bytes)):
            raise PlotScaleDataError("discrete range expects a sequence of labels, not a single string")
        batch = values if isinstance(values, CategoricalBatch) else CategoricalBatch(labels=tuple(values))
        if drop:
            # Most recent batch wins.
            self._labels = list(batch.observed())
            return
        incoming = batch.levels if batch.levels is not None else batch.observed()
        known = set(self._labels)
        for label in incoming:
            if label not in known:
                known.add(label)
                self._labels.append(label)

    def limits(self) -> tuple[str, ...]:
        return tuple(self._labels)

    def reset(self) -> None:
        self._labels.clear()


@dataclass
class ContinuousRange:
    """Running min/max over finite numeric values; empty until trained."""

    _lo: float | None = None
    _hi: float | None = None

    @property
    def is_empty(self) -> bool:
        return self._lo is None

    def train(self, values: NumericBatch | Iterable[float] | np.ndarray) -> None:
        if isinstance(values, NumericBatch):
            finite = values.finite()
        else:
            arr = np.asarray(list(values) if not isinstance(values, np.ndarray) else values, dtype=np.float64)
            finite = arr[np.isfinite(arr)]
        if finite.size == 0:
            return
        lo = float(np.min(finite))
        hi = float(np.max(finite))
        if self._lo is None or self._hi is None:
            self._lo, self._hi = lo, hi
            return
        self._lo = min(self._lo, lo)
        self._hi = max(self._hi, hi)

    def range(self) -> Interval | None:
        if self._lo is None or self._hi is None:
            return None
        return (self._lo, self._hi)

    def reset(self) -> None:
        self._lo = None
        self._hi = None


def expand_range(
    rng: Interval | None,
    mul: float | tuple[float, float] = 0.0,
    add: float | tuple[float, float] = 0.0,
    zero_width: float = 1.0,
) -> Interval | None:
    """Pad ``rng`` by ``mul * width + add`` on each end.

    ``mul`` and ``add`` take a scalar for both ends or a ``(lower, upper)``
    pair. Zero-width intervals use ``zero_width`` as their width.
    """
    if rng is None:
        return None
    lo, hi = float(rng[0]), float(rng[1])
    mul_lo, mul_hi = _pair(mul)
    add_lo, add_hi = _pair(add)
    width = zero_width if _zero_range(lo, hi) else hi - lo
    return (lo - (width * mul_lo + add_lo), hi + (width * mul_hi + add_hi))


def union_range(*ranges: Interval | None) -> Interval | None:
    present = [r for r in ranges if r is not None]
    if not present:
        return None
    return (min(r[0] for r in present), max(r[1] for r in present))


def _pair(value: Any) -> tuple[float, float]:
    if isinstance(value, (tuple, list)):
        lower, upper = value
        return (float(lower), float(upper))
    return (float(value), float(value))


def _zero_range(lo: float, hi: float) -> bool:
    if lo == hi:
        return True
    scale = max(abs(lo), abs(hi))
    return abs(hi - lo) <= scale * 1000 * np.finfo(np.float64).eps
