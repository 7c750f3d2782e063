from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, TypeAlias

import numpy as np


@dataclass(frozen=True)
class Categorical:
    label: str


@dataclass(frozen=True)
class Numeric:
    value: float


@dataclass(frozen=True)
class CategoricalBatch:
    """A homogeneous categorical column.

    ``None`` entries are missing values. ``levels`` carries the declared level
    order when the source has one (e.g. a pandas categorical).
    """

    labels: tuple[str | None, ...]
    levels: tuple[str, ...] | None = None

    def __len__(self) -> int:
        return len(self.labels)

    def observed(self) -> tuple[str, ...]:
        seen: dict[str, None] = {}
        for label in self.labels:
            if label is not None:
                seen.setdefault(label, None)
        if self.levels is None:
            return tuple(seen)
        return tuple(level for level in self.levels if level in seen)

    def items(self) -> Iterator[Categorical | None]:
        for label in self.labels:
            yield None if label is None else Categorical(label)


@dataclass(frozen=True, eq=False)
class NumericBatch:
    values: np.ndarray

    def __len__(self) -> int:
        return int(self.values.size)

    def finite(self) -> np.ndarray:
        return self.values[np.isfinite(self.values)]

    def items(self) -> Iterator[Numeric]:
        for value in self.values.tolist():
            yield Numeric(float(value))


Batch: TypeAlias = CategoricalBatch | NumericBatch
