from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from console_plot.layout import TEXT_SIZE, AxisGeometry, LabelAnchor, PlotGeometry
from console_plot.scales import format_number
from console_plot.series import SeriesData


SVG_NS = "http://www.w3.org/2000/svg"

AXIS_STROKE = "black"
AXIS_STROKE_WIDTH = 0.25
MARKER_RADIUS = 0.5
MARKER_FILL = "black"


@dataclass(frozen=True)
class SvgNode:
    """Immutable scene-graph node; attributes keep insertion order."""

    tag: str
    attrs: tuple[tuple[str, str], ...] = ()
    text: str | None = None
    children: tuple["SvgNode", ...] = ()

    def get(self, name: str, default: str | None = None) -> str | None:
        for key, value in self.attrs:
            if key == name:
                return value
        return default

    def iter(self, tag: str | None = None) -> Iterator["SvgNode"]:
        if tag is None or self.tag == tag:
            yield self
        for child in self.children:
            yield from child.iter(tag)


def build_scatter_scene(data: SeriesData, geometry: PlotGeometry) -> SvgNode:
    x_min_label, x_max_label, y_min_label, y_max_label = geometry.labels
    children: list[SvgNode] = [
        _axis_node(geometry.x_axis),
        _label_node(x_min_label),
        _label_node(x_max_label),
        _axis_node(geometry.y_axis),
        _label_node(y_min_label),
        _label_node(y_max_label),
    ]
    # Markers come last so they paint over axes and labels.
    for x, y in zip(data.x.tolist(), data.y.tolist(), strict=True):
        children.append(
            SvgNode(
                tag="circle",
                attrs=(
                    ("cx", format_number(x)),
                    ("cy", format_number(y)),
                    ("r", format_number(MARKER_RADIUS)),
                    ("fill", MARKER_FILL),
                ),
            )
        )

    return SvgNode(
        tag="svg",
        attrs=(
            ("xmlns", SVG_NS),
            ("viewBox", geometry.view_box_attr()),
            ("width", f"{format_number(geometry.width)}px"),
            ("height", f"{format_number(geometry.height)}px"),
        ),
        children=tuple(children),
    )


def _axis_node(axis: AxisGeometry) -> SvgNode:
    return SvgNode(
        tag="path",
        attrs=(
            ("d", axis.path_data()),
            ("stroke", AXIS_STROKE),
            ("stroke-width", format_number(AXIS_STROKE_WIDTH)),
        ),
    )


def _label_node(label: LabelAnchor) -> SvgNode:
    attrs = [
        ("style", f"font-size: {format_number(TEXT_SIZE)}pt;"),
        ("text-anchor", label.text_anchor),
    ]
    if label.dominant_baseline is not None:
        attrs.append(("dominant-baseline", label.dominant_baseline))
    attrs.extend([("x", format_number(label.x)), ("y", format_number(label.y))])
    return SvgNode(tag="text", attrs=tuple(attrs), text=label.text)
