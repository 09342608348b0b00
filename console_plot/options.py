from __future__ import annotations

from dataclasses import asdict, dataclass
import math
import numbers
from typing import Any, Mapping

from console_plot.errors import ValidationError


PLOT_TYPES = ("scatter",)


@dataclass(frozen=True)
class PlotOptions:
    """Per-render configuration.

    ``xaxis`` is the y coordinate the horizontal axis is drawn at and
    ``yaxis`` the x coordinate of the vertical axis, both in data units.
    """

    padding: float = 20.0
    xaxis: float = 0.0
    yaxis: float = 0.0
    type: str = "scatter"


DEFAULT_OPTIONS = PlotOptions()


def resolve_plot_options(options: PlotOptions | Mapping[str, Any] | None = None) -> PlotOptions:
    """Merge option overrides against defaults and validate the result."""

    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, PlotOptions):
        overrides: Mapping[str, Any] = asdict(options)
    elif isinstance(options, Mapping):
        overrides = options
    else:
        raise ValidationError(f"options must be a mapping or PlotOptions, got {type(options)!r}")

    raw: dict[str, Any] = asdict(DEFAULT_OPTIONS)
    for key, value in overrides.items():
        if key not in raw:
            raise ValidationError(f"Unknown plot option: {key}")
        raw[key] = value

    for key in ("padding", "xaxis", "yaxis"):
        raw[key] = _finite_number(key, raw[key])
    if raw["padding"] < 0:
        raise ValidationError("Option `padding` must be >= 0")

    if raw["type"] not in PLOT_TYPES:
        raise ValidationError(f"Unsupported plot type: {raw['type']!r} (expected one of {', '.join(PLOT_TYPES)})")

    return PlotOptions(
        padding=raw["padding"],
        xaxis=raw["xaxis"],
        yaxis=raw["yaxis"],
        type=str(raw["type"]),
    )


def _finite_number(key: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(f"Option `{key}` must be a number")
    out = float(value)
    if not math.isfinite(out):
        raise ValidationError(f"Option `{key}` must be finite")
    return out
