"""Straight chain runs between the two sprockets."""

from __future__ import annotations

import logging
import math
from typing import List, Tuple

from ..models.geometry import Point
from ..models.scene import WHITE, Circle, Group, Line, Mask, Shape
from .primitives import angle_between, phase, tangent_line, to_rad
from .sprocket import (
    LINK_COLOR_1,
    LINK_COLOR_2,
    PIN_RATIO,
    PLATE_RATIO,
    DriveSprocket,
    Sprocket,
)

logger = logging.getLogger(__name__)


class ChainSegment:
    """One straight run of chain along a tangent of the two pitch circles.

    The links are laid out once, slightly longer than the tangent, and then
    slid back and forth along the run by at most one link as the master
    turns. A clip the width of a roller along the tangent hides whatever
    sticks out past the true endpoints.

    Args:
        master: The driving sprocket the links phase-lock to.
        slave: The sprocket at the other end of the run.
        ring_origin: First link point of the master's wrap ring, used to
            line the straight links up with the wrapped ones.
        flip: Selects the other tangent and reverses the direction of travel.
    """

    def __init__(self, master: DriveSprocket, slave: Sprocket, ring_origin: Point, flip: bool = True):
        self.master = master
        self.slave = slave
        self.flip = flip
        self.direction = 1 if flip else -1
        self.name = "chain-upper" if flip else "chain-lower"
        # Starts on the slave, ends on the master
        self.line = tangent_line(slave.pitch_circle, master.pitch_circle, flip)
        self.angle = self.line.angle
        self.length = self.line.length
        # Angle covered by the sprocket in one tooth of movement
        self.tooth_arc = (2 * math.pi) / master.teeth
        self.draw_offset = self._draw_offset(ring_origin)
        self.correction = self._correction()
        # Rounded up after the correction so the strip always overshoots the slave end
        self.link_count = math.ceil(self.length / (master.pitch * 2) - self.correction)
        self.strip_start = master.pitch * self.correction + self.draw_offset
        self.strip_end = self.strip_start + master.pitch * 2 * self.link_count
        self.shapes = self._build_links()
        self.clip = Mask((Line(self.line.start, self.line.end, WHITE, master.roller_dia),))
        self.translation: Point = (0.0, 0.0)
        logger.debug(
            "%s: length %.2f, %d links, offset %.3f", self.name, self.length, self.link_count, self.draw_offset
        )

    def _draw_offset(self, ring_origin: Point) -> float:
        origin = (ring_origin[0] - self.master.x, ring_origin[1] - self.master.y)
        intercept = (self.line.end[0] - self.master.x, self.line.end[1] - self.master.y)
        t = angle_between(origin, intercept)
        return ((t % (self.tooth_arc * 2)) - self.tooth_arc) * self.master.r

    def _correction(self) -> int:
        ca = -3 if self.flip else -2
        # Odd tooth counts shift the links half a link along this run
        if self.master.teeth % 2 != 0 and self.flip:
            ca -= 1
        return ca

    def _along(self, distance: float) -> Point:
        return (
            self.line.end[0] + math.cos(self.angle) * distance,
            self.line.end[1] + math.sin(self.angle) * distance,
        )

    def _build_links(self) -> Tuple[Shape, ...]:
        pitch = self.master.pitch
        roll = self.master.roller_dia
        links: List[Shape] = []
        for i in range(self.link_count):
            d = self.strip_start + i * pitch * 2
            a = self._along(d)
            b = self._along(d + pitch)
            links.append(Line(a, b, LINK_COLOR_1, roll * PLATE_RATIO))
            links.append(Circle(a, roll / 2, LINK_COLOR_1))
            links.append(Circle(b, roll / 2, LINK_COLOR_1))
            links.append(Circle(a, roll * PIN_RATIO / 2, LINK_COLOR_2))
            links.append(Circle(b, roll * PIN_RATIO / 2, LINK_COLOR_2))
        # Inner plates run underneath the whole strip
        backing = Line(self._along(self.strip_start), self._along(self.strip_end), LINK_COLOR_2, roll * PLATE_RATIO)
        return (backing, *links)

    @property
    def strip_reach(self) -> float:
        """How far the laid-out links extend past the slave tangent point."""
        return self.strip_end - self.length

    def mesh(self) -> None:
        # Whatever angle the chainring is at, take it modulo one link of
        # travel and move the chain by the arc length covered
        arc = phase(to_rad(self.master.angle), self.tooth_arc * 2)
        travel = arc * self.master.r * self.direction
        self.translation = (travel * math.cos(self.angle), travel * math.sin(self.angle))

    def render(self) -> Group:
        links = Group(f"{self.name}-links", self.shapes).translated(*self.translation)
        return Group(self.name, (links,)).masked(self.clip)
