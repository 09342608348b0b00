from __future__ import annotations

from dataclasses import dataclass

from console_plot.options import PlotOptions
from console_plot.scales import format_number
from console_plot.series import BoundingBox


# Label font size in points. Also drives tick length and label offsets.
TEXT_SIZE = 6.0

Point = tuple[float, float]
Segment = tuple[Point, Point]


@dataclass(frozen=True)
class AxisGeometry:
    line: Segment
    ticks: tuple[Segment, Segment]

    def path_data(self) -> str:
        parts = []
        for (x0, y0), (x1, y1) in (self.line, *self.ticks):
            parts.append(
                f"M {format_number(x0)} {format_number(y0)} L {format_number(x1)} {format_number(y1)}"
            )
        return " ".join(parts)


@dataclass(frozen=True)
class LabelAnchor:
    text: str
    x: float
    y: float
    text_anchor: str
    dominant_baseline: str | None = None


@dataclass(frozen=True)
class PlotGeometry:
    """Drawing-surface geometry in data units.

    ``view_box`` is the padded window onto the data; ``width``/``height`` are
    the unpadded surface size in pixels, so one data unit maps to one pixel
    across the core plot area.
    """

    view_box: tuple[float, float, float, float]
    width: float
    height: float
    x_axis: AxisGeometry
    y_axis: AxisGeometry
    labels: tuple[LabelAnchor, LabelAnchor, LabelAnchor, LabelAnchor]

    def view_box_attr(self) -> str:
        return " ".join(format_number(v) for v in self.view_box)


def compute_layout(bbox: BoundingBox, options: PlotOptions) -> PlotGeometry:
    pad = options.padding
    xaxis = options.xaxis
    yaxis = options.yaxis
    tick = TEXT_SIZE / 2

    x_axis = AxisGeometry(
        line=((bbox.x.min - pad, xaxis), (bbox.x.max + pad, xaxis)),
        ticks=(
            ((bbox.x.min, xaxis), (bbox.x.min, xaxis + tick)),
            ((bbox.x.max, xaxis), (bbox.x.max, xaxis + tick)),
        ),
    )
    y_axis = AxisGeometry(
        line=((yaxis, bbox.y.min - pad), (yaxis, bbox.y.max + pad)),
        ticks=(
            ((yaxis, bbox.y.min), (yaxis - tick, bbox.y.min)),
            ((yaxis, bbox.y.max), (yaxis - tick, bbox.y.max)),
        ),
    )

    x_label_y = xaxis + 2 * TEXT_SIZE
    y_label_x = yaxis - 2.5 * TEXT_SIZE
    labels = (
        LabelAnchor(text=format_number(bbox.x.min), x=bbox.x.min, y=x_label_y, text_anchor="middle"),
        LabelAnchor(text=format_number(bbox.x.max), x=bbox.x.max, y=x_label_y, text_anchor="middle"),
        LabelAnchor(
            text=format_number(bbox.y.min),
            x=y_label_x,
            y=bbox.y.min,
            text_anchor="end",
            dominant_baseline="central",
        ),
        LabelAnchor(
            text=format_number(bbox.y.max),
            x=y_label_x,
            y=bbox.y.max,
            text_anchor="end",
            dominant_baseline="central",
        ),
    )

    return PlotGeometry(
        view_box=(
            bbox.x.min - pad,
            bbox.y.min - pad,
            bbox.width + 2 * pad,
            bbox.height + 2 * pad,
        ),
        width=bbox.width,
        height=bbox.height,
        x_axis=x_axis,
        y_axis=y_axis,
        labels=labels,
    )
