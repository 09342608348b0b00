from __future__ import annotations

from decimal import Decimal
import math
from typing import Any

import numpy as np

from console_plot.adapters.normalize import coerce_series
from console_plot.errors import ValidationError
from console_plot.series import BoundingBox, Extent, SeriesData


def compute_extent(series: Any, *, label: str = "values") -> Extent:
    values = coerce_series(series, label=label)
    return Extent(min=float(np.min(values)), max=float(np.max(values)))


def compute_bounding_box(data: SeriesData) -> BoundingBox:
    return BoundingBox(
        x=compute_extent(data.x, label="x"),
        y=compute_extent(data.y, label="y"),
        z=compute_extent(data.z, label="z") if data.z is not None else None,
    )


def format_number(value: float) -> str:
    """Format a number for SVG attributes, label text and CSS values.

    Matches JavaScript ``Number.prototype.toString``: shortest round-tripping
    digits, plain notation for ``1e-6 <= |value| < 1e21`` and exponent
    notation (``1e-7``, ``1.5e+21``) outside that range. Negative zero prints
    as ``0``.
    """
    value = float(value)
    if not math.isfinite(value):
        raise ValidationError(f"cannot format non-finite value: {value!r}")
    if value == 0.0:
        return "0"

    shortest = repr(value)
    if abs(value) >= 1e21 or abs(value) < 1e-6:
        mantissa, _, exp = shortest.partition("e")
        if mantissa.endswith(".0"):
            mantissa = mantissa[:-2]
        exponent = int(exp)
        return f"{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"

    out = format(Decimal(shortest), "f")
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    return out
