from console_plot.api import Plot, RenderedPlot, plot2d, plot3d, render2d
from console_plot.console import LoggingConsole, StyledConsole
from console_plot.errors import ConsolePlotError, EncodingError, UnsupportedPlotError, ValidationError
from console_plot.options import DEFAULT_OPTIONS, PlotOptions
from console_plot.series import BoundingBox, Extent, SeriesData

__all__ = [
    "BoundingBox",
    "ConsolePlotError",
    "DEFAULT_OPTIONS",
    "EncodingError",
    "Extent",
    "LoggingConsole",
    "Plot",
    "PlotOptions",
    "RenderedPlot",
    "SeriesData",
    "StyledConsole",
    "UnsupportedPlotError",
    "ValidationError",
    "plot2d",
    "plot3d",
    "render2d",
]
