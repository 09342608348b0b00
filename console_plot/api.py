from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Mapping

from console_plot.adapters import normalize_series
from console_plot.console import LoggingConsole, StyledConsole, present
from console_plot.encode import encode_scene
from console_plot.errors import UnsupportedPlotError, ValidationError
from console_plot.layout import compute_layout
from console_plot.options import PlotOptions, resolve_plot_options
from console_plot.scales import compute_bounding_box
from console_plot.scene import SvgNode, build_scatter_scene
from console_plot.series import BoundingBox, SeriesData


LOGGER = logging.getLogger(__name__)

OptionsLike = PlotOptions | Mapping[str, Any] | None


@dataclass(frozen=True)
class RenderedPlot:
    data_uri: str
    format_string: str
    style: str


@dataclass(frozen=True)
class Plot:
    data: SeriesData
    bbox: BoundingBox

    @classmethod
    def from_series(cls, x: Any, y: Any, z: Any = None) -> Plot:
        data = normalize_series(x, y, z)
        return cls(data=data, bbox=compute_bounding_box(data))

    def scene(self, options: OptionsLike = None) -> SvgNode:
        resolved = resolve_plot_options(options)
        if self.data.is_3d:
            raise UnsupportedPlotError("3D scatter plots are not supported")
        return build_scatter_scene(self.data, compute_layout(self.bbox, resolved))

    def render(self, options: OptionsLike = None) -> RenderedPlot:
        data_uri = encode_scene(self.scene(options))
        format_string, style = present(data_uri, self.bbox)
        LOGGER.debug(
            "rendered scatter plot: points=%d bbox=%sx%s uri_chars=%d",
            self.data.size,
            self.bbox.width,
            self.bbox.height,
            len(data_uri),
        )
        return RenderedPlot(data_uri=data_uri, format_string=format_string, style=style)


def render2d(x: Any, y: Any, options: OptionsLike = None) -> RenderedPlot:
    return Plot.from_series(x, y).render(options)


def plot2d(x: Any, y: Any, options: OptionsLike = None, *, console: StyledConsole | None = None) -> RenderedPlot:
    """Render ``x``/``y`` as a scatter plot and log it as one styled console line."""
    return _emit(Plot.from_series(x, y), options, console)


def plot3d(
    x: Any,
    y: Any,
    z: Any,
    options: OptionsLike = None,
    *,
    console: StyledConsole | None = None,
) -> RenderedPlot:
    """Validate ``x``/``y``/``z``; 3D rendering itself raises UnsupportedPlotError."""
    if z is None:
        raise ValidationError("plot3d requires a z series; use plot2d for 2D data")
    return _emit(Plot.from_series(x, y, z), options, console)


def _emit(plot: Plot, options: OptionsLike, console: StyledConsole | None) -> RenderedPlot:
    # Everything is rendered before the single log call.
    rendered = plot.render(options)
    (console or LoggingConsole()).log(rendered.format_string, rendered.style)
    return rendered
