from __future__ import annotations

import logging
import math
from typing import Mapping, Protocol

from console_plot.scales import format_number
from console_plot.series import BoundingBox


LOGGER = logging.getLogger(__name__)

FORMAT_STRING = "%cconsole.plot"
PADDING_SCALE = 1 / 8


class StyledConsole(Protocol):
    """Host logging facility that applies ``%c`` arguments as inline CSS."""

    def log(self, fmt: str, *styles: str) -> None:
        ...


class LoggingConsole:
    """Console host backed by the standard logging module.

    The ``%c`` tokens are dropped from the message; the CSS strings ride on
    the record as ``console_styles`` for handlers that can render them.
    Standard handlers print only ``console.plot``; to see the image, pass a
    ``StyledConsole`` that understands ``%c`` or attach a handler that reads
    ``record.console_styles``.
    """

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self.logger = logger or LOGGER
        self.level = level

    def log(self, fmt: str, *styles: str) -> None:
        self.logger.log(self.level, "%s", fmt.replace("%c", ""), extra={"console_styles": styles})


def compute_console_style(data_uri: str, bbox: BoundingBox) -> dict[str, str]:
    # Degenerate widths give no vertical extent, as the browser's integer
    # truncation of Infinity/NaN would.
    aspect = bbox.height / bbox.width if bbox.width else 0.0
    h = math.floor(aspect * 100)
    return {
        "display": "inline-block",
        "color": "transparent",
        "background": f"url({data_uri})",
        "background-repeat": "no-repeat",
        "background-size": f"100% {h}%",
        "padding": f"{format_number(h * PADDING_SCALE)}% {format_number(100 * PADDING_SCALE)}%",
        "max-width": f"{format_number(bbox.width)}px",
        "max-height": f"{format_number(bbox.height)}px",
    }


def flatten_style(style: Mapping[str, str]) -> str:
    return " ".join(f"{key}: {value};" for key, value in style.items())


def present(data_uri: str, bbox: BoundingBox) -> tuple[str, str]:
    return FORMAT_STRING, flatten_style(compute_console_style(data_uri, bbox))
