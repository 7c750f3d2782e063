from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from numbers import Number
from typing import Any

import numpy as np

from plotscale.errors import PlotScaleDataError
from plotscale.values import Batch, CategoricalBatch, NumericBatch


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def classify_values(value: Any, *, label: str = "values") -> Batch:
    """Classify a raw column once, at ingestion, as categorical or numeric."""
    if isinstance(value, (CategoricalBatch, NumericBatch)):
        return value

    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise PlotScaleDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        if tensor.dtype == torch.bool:
            return CategoricalBatch(labels=tuple(str(v) for v in tensor.tolist()))
        return NumericBatch(values=tensor.to(torch.float64).numpy())

    if pd is not None and isinstance(value, (pd.Series, pd.Categorical, pd.Index)):
        return _classify_pandas(value, label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise PlotScaleDataError(f"{label} must be 1-D")
        return _classify_ndarray(value, label=label)

    if isinstance(value, (str, bool, np.bool_, Number)):
        return _classify_ndarray(np.asarray([value], dtype=object), label=label)

    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return _classify_ndarray(np.asarray(list(value), dtype=object), label=label)

    raise PlotScaleDataError(f"unsupported {label} input type: {type(value)!r}")


def _classify_pandas(value: Any, *, label: str) -> Batch:
    if getattr(value, "ndim", 1) != 1:
        raise PlotScaleDataError(f"{label} must be 1-D")
    if isinstance(value.dtype, pd.CategoricalDtype):
        cat = pd.Categorical(value)
        levels = tuple(str(level) for level in cat.categories.tolist())
        labels = tuple(None if code < 0 else levels[code] for code in cat.codes.tolist())
        return CategoricalBatch(labels=labels, levels=levels)
    if pd.api.types.is_bool_dtype(value.dtype) or not pd.api.types.is_numeric_dtype(value.dtype):
        return _classify_ndarray(np.asarray(value, dtype=object), label=label)
    return NumericBatch(values=np.asarray(value, dtype=np.float64))


def _classify_ndarray(arr: np.ndarray, *, label: str) -> Batch:
    kind = arr.dtype.kind
    if kind in {"i", "u", "f"}:
        return NumericBatch(values=arr.astype(np.float64, copy=False))
    if kind == "b":
        return CategoricalBatch(labels=tuple(str(bool(v)) for v in arr.tolist()))
    if kind in {"U", "S"}:
        return CategoricalBatch(labels=tuple(_as_label(v) for v in arr.tolist()))
    if kind != "O":
        raise PlotScaleDataError(f"unsupported {label} dtype: {arr.dtype}")

    raw = arr.tolist()
    present = [v for v in raw if not _is_missing(v)]
    if not raw:
        return NumericBatch(values=np.empty(0, dtype=np.float64))
    if present and all(_is_numeric(v) for v in present):
        out = np.empty(len(raw), dtype=np.float64)
        for i, v in enumerate(raw):
            out[i] = np.nan if _is_missing(v) else float(v)
        return NumericBatch(values=out)
    return CategoricalBatch(labels=tuple(None if _is_missing(v) else _as_label(v) for v in raw))


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (float, np.floating)) and np.isnan(value):
        return True
    return pd is not None and (value is pd.NA or value is pd.NaT)


def _is_numeric(value: Any) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (Number, Decimal))


def _as_label(value: Any) -> str:
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise PlotScaleDataError(f"label is not valid UTF-8: {value!r}") from exc
    return str(value)
