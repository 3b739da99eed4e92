"""Masks that keep wrap-link rings out from under the straight chain runs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..models.geometry import Point
from ..models.scene import BLACK, WHITE, Circle, Mask, Polygon
from .chain import ChainSegment
from .sprocket import Sprocket

KEEP_RADIUS_RATIO = 1.5  # Visible circle around a ring, as a multiple of cr


@dataclass(frozen=True)
class WrapMask:
    """Quadrilateral spanned by the four tangent endpoints.

    Whatever part of a sprocket's link ring falls inside it is hidden, since
    the chain segments draw that stretch of chain. Built once per drivetrain
    from finished segments; per frame only the rings rotate beneath it.
    """

    polygon: Tuple[Point, ...]

    @classmethod
    def between(cls, upper: ChainSegment, lower: ChainSegment) -> "WrapMask":
        return cls((upper.line.end, lower.line.end, lower.line.start, upper.line.start))

    def for_sprocket(self, sprocket: Sprocket) -> Mask:
        return Mask((
            Circle(sprocket.center, sprocket.cr * KEEP_RADIUS_RATIO, WHITE),
            Polygon(self.polygon, BLACK),
        ))
