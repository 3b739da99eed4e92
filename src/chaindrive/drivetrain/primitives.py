"""Geometry primitives shared by sprockets and chain runs.

Rotations and display angles are in degrees; all trigonometry is done in
radians. Conversion happens at component boundaries through
:func:`to_rad` and :func:`to_deg`.
"""

import math
from typing import List

from ..errors import ConfigurationError
from ..models.geometry import PitchCircle, Point, TangentLine


def to_rad(degrees: float) -> float:
    return degrees * (math.pi / 180)


def to_deg(radians: float) -> float:
    return radians * (180 / math.pi)


def phase(value: float, period: float) -> float:
    """Remainder of ``value / period`` carrying the sign of ``value``.

    Sprockets normally turn towards negative angles, and the per-frame
    offsets of the link ring and chain runs are taken over that signed
    remainder.
    """
    return math.fmod(value, period)


def polygon_points(radius: float, count: int, cx: float = 0.0, cy: float = 0.0) -> List[Point]:
    """Return ``count`` points evenly spaced on a circle.

    The first point sits at angle 0 and the rest follow counter-clockwise
    (in a y-up frame) by increasing index.
    """
    return [
        (
            radius * math.cos(2 * math.pi * i / count) + cx,
            radius * math.sin(2 * math.pi * i / count) + cy,
        )
        for i in range(count)
    ]


def angle_between(u: Point, v: Point) -> float:
    """Unsigned angle between two vectors, in radians."""
    dot = u[0] * v[0] + u[1] * v[1]
    mag = math.hypot(*u) * math.hypot(*v)
    if mag == 0:
        return 0.0
    return math.acos(max(-1.0, min(1.0, dot / mag)))


def tangent_line(a: PitchCircle, b: PitchCircle, flip: bool = False) -> TangentLine:
    """Outer common tangent of two circles.

    Both endpoints are placed on the same side of the centre line, so open
    and crossed belts are not distinguished; ``flip`` picks the other of the
    two outer tangents. The returned line starts on ``a`` and ends on ``b``
    and has length ``sqrt(l**2 - (ra - rb)**2)`` for centre distance ``l``.

    See http://mathworld.wolfram.com/Circle-CircleTangents.html

    Raises:
        ConfigurationError: if one circle encloses the other.
    """
    rd = a.radius - b.radius
    lx = a.x - b.x
    ly = a.y - b.y
    l = math.hypot(lx, ly)
    if l == 0 or l < abs(rd):
        raise ConfigurationError(
            f"no common tangent: centre distance {l:.3f} is less than radius difference {abs(rd):.3f}"
        )
    a0 = math.atan2(ly, lx)
    theta = math.asin(rd / l)
    if flip:
        at = -theta + math.pi + a0
    else:
        at = theta + a0

    start = (-a.radius * math.sin(at) + a.x, a.radius * math.cos(at) + a.y)
    end = (-b.radius * math.sin(at) + b.x, b.radius * math.cos(at) + b.y)
    return TangentLine(start, end)
