from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from axis_plot.errors import PlotDataError
from axis_plot.types import PlotPoint


try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def points_from_xy(y: Any, *, x: Any = None) -> list[PlotPoint]:
    """Build plot points from parallel x/y data.

    ``y`` (and ``x``) may be a list, tuple, numpy array or torch tensor. When
    ``x`` is omitted the sample index is used. Pairs with a non-finite
    coordinate are dropped.
    """
    y_arr = _coerce_1d_numeric(y, label="y")
    if x is None:
        x_arr = np.arange(y_arr.size, dtype=np.float64)
    else:
        x_arr = _coerce_1d_numeric(x, label="x")

    if x_arr.shape != y_arr.shape:
        raise PlotDataError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")

    mask = np.isfinite(x_arr) & np.isfinite(y_arr)
    return [PlotPoint(x=float(px), y=float(py)) for px, py in zip(x_arr[mask].tolist(), y_arr[mask].tolist(), strict=True)]


def points_from_pairs(pairs: Iterable[Sequence[float]]) -> list[PlotPoint]:
    out: list[PlotPoint] = []
    for i, pair in enumerate(pairs):
        if len(pair) != 2:
            raise PlotDataError(f"pair at index {i} must have exactly 2 values, got {len(pair)}")
        try:
            out.append(PlotPoint(x=float(pair[0]), y=float(pair[1])))
        except (TypeError, ValueError) as exc:
            raise PlotDataError(f"pair at index {i} is not numeric: {pair!r}") from exc
    return out


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise PlotDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return _coerce_ndarray(np.asarray(value, dtype=object), label=label)

    raise PlotDataError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.ndim != 1:
        raise PlotDataError(f"{label} must be 1-D")
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise PlotDataError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
