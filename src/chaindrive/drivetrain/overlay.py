"""Construction-geometry overlay for checking the chain layout by eye."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from ..models.scene import NONE, Circle, Group, Line, Node
from .sprocket import Sprocket

if TYPE_CHECKING:
    from .train import DriveTrain

OVERLAY_COLOR = "#e74c3c"
OVERLAY_WIDTH = 2.0
MARKER_DIAMETER = 8.0


class DebugOverlay:
    """Tangent lines, pitch circles and endpoint markers of a drivetrain.

    A diameter line per sprocket turns with the sprocket so its angle can
    be compared against the links.
    """

    def __init__(self, train: "DriveTrain"):
        self.train = train

    def _circle(self, center, radius) -> Circle:
        return Circle(center, radius, NONE, OVERLAY_COLOR, OVERLAY_WIDTH)

    def _line(self, start, end) -> Line:
        return Line(start, end, OVERLAY_COLOR, OVERLAY_WIDTH)

    def _dial(self, sprocket: Sprocket) -> Group:
        line = self._line((sprocket.x, sprocket.y - sprocket.r), (sprocket.x, sprocket.y + sprocket.r))
        return Group(f"debug-{sprocket.name}-dial", (line,)).rotated(sprocket.angle, sprocket.center)

    def render(self) -> Group:
        train = self.train
        marker = MARKER_DIAMETER / 2
        bits: List[Node] = [
            self._line(train.upper.line.start, train.upper.line.end),
            self._line(train.lower.line.start, train.lower.line.end),
            self._circle(train.master.center, train.master.r),
            self._circle(train.slave.center, train.slave.r),
        ]
        for segment in (train.upper, train.lower):
            bits.append(self._circle(segment.line.end, marker))
            bits.append(self._circle(segment.line.start, marker))
        bits.append(self._circle(train.master.links.points[0], marker))
        bits.append(self._dial(train.master))
        bits.append(self._dial(train.slave))
        return Group("debug", tuple(bits))
