from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from console_plot.errors import ValidationError
from console_plot.series import SeriesData


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def normalize_series(x: Any, y: Any, z: Any = None) -> SeriesData:
    x_arr = coerce_series(x, label="x")
    y_arr = coerce_series(y, label="y")
    z_arr = coerce_series(z, label="z") if z is not None else None

    if x_arr.shape != y_arr.shape:
        raise ValidationError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")
    if z_arr is not None and z_arr.shape != x_arr.shape:
        raise ValidationError(f"x and z length mismatch: {x_arr.size} != {z_arr.size}")

    return SeriesData(x=x_arr, y=y_arr, z=z_arr)


def coerce_series(value: Any, *, label: str) -> np.ndarray:
    if value is None:
        raise ValidationError(f"{label} input is required")
    arr = _to_ndarray(value, label=label)
    if arr.size == 0:
        raise ValidationError(f"{label} series is empty")
    if not np.all(np.isfinite(arr)):
        index = int(np.flatnonzero(~np.isfinite(arr))[0])
        raise ValidationError(f"{label} contains non-finite value at index {index}: {arr[index]!r}")
    return arr


def _to_ndarray(value: Any, *, label: str) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise ValidationError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise ValidationError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, (Sequence, range)) and not isinstance(value, (str, bytes, bytearray)):
        return _coerce_ndarray(np.asarray(list(value), dtype=object), label=label)

    raise ValidationError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.ndim != 1:
        raise ValidationError(f"{label} must be 1-D")
    if arr.dtype.kind in {"i", "u", "f"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None or isinstance(raw, (bool, str, bytes)):
            raise ValidationError(f"{label} contains non-numeric value at index {i}: {raw!r}")
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
