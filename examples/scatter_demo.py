from __future__ import annotations

import logging

import numpy as np

from console_plot import plot2d


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    x = np.linspace(-40.0, 40.0, 81)
    y = 0.02 * x**2 - 10.0
    rendered = plot2d(x, y, {"padding": 10})
    # Paste into a browser devtools console to see the image.
    print(f"console.log({rendered.format_string!r}, {rendered.style!r})")


if __name__ == "__main__":
    main()
