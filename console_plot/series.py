from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SeriesData:
    x: np.ndarray
    y: np.ndarray
    z: np.ndarray | None = None

    @property
    def size(self) -> int:
        return int(self.x.size)

    @property
    def is_3d(self) -> bool:
        return self.z is not None


@dataclass(frozen=True)
class Extent:
    min: float
    max: float

    @property
    def span(self) -> float:
        return self.max - self.min


@dataclass(frozen=True)
class BoundingBox:
    x: Extent
    y: Extent
    z: Extent | None = None

    @property
    def width(self) -> float:
        return self.x.span

    @property
    def height(self) -> float:
        return self.y.span

    @property
    def depth(self) -> float | None:
        if self.z is None:
            return None
        return self.z.span
