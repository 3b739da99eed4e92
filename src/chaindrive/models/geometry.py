"""Geometric value types for sprockets and chain runs."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from ..errors import ConfigurationError

Point = Tuple[float, float]


def circumradius(teeth: int, pitch: float) -> float:
    """Radius of the circle through the tooth tips of a sprocket."""
    return pitch / (2 * math.sin(math.pi / teeth))


def pitch_radius(teeth: int, pitch: float) -> float:
    """Inradius of the sprocket polygon, where the chain engages."""
    return pitch / (2 * math.tan(math.pi / teeth))


@dataclass(frozen=True)
class PitchCircle:
    """A sprocket reduced to its centre and pitch radius."""

    center: Point
    radius: float

    @property
    def x(self) -> float:
        return self.center[0]

    @property
    def y(self) -> float:
        return self.center[1]


@dataclass(frozen=True)
class TangentLine:
    """Straight chain run between two pitch circles.

    ``start`` lies on the first circle passed to the tangent construction,
    ``end`` on the second.
    """

    start: Point
    end: Point

    @property
    def dx(self) -> float:
        return self.start[0] - self.end[0]

    @property
    def dy(self) -> float:
        return self.start[1] - self.end[1]

    @property
    def length(self) -> float:
        return math.hypot(self.dx, self.dy)

    @property
    def angle(self) -> float:
        """Direction from ``end`` towards ``start``, in radians."""
        return math.atan2(self.dy, self.dx)


@dataclass(frozen=True)
class SprocketSpec:
    """Immutable sprocket dimensions and placement."""

    teeth: int
    pitch: float
    roller_dia: float
    center: Point = (0.0, 0.0)

    def __post_init__(self):
        if isinstance(self.teeth, bool) or not isinstance(self.teeth, int):
            raise ConfigurationError(f"teeth must be an integer, got {self.teeth!r}")
        if self.teeth < 3:
            raise ConfigurationError(f"a sprocket needs at least 3 teeth, got {self.teeth}")
        if not self.pitch > 0:
            raise ConfigurationError(f"pitch must be positive, got {self.pitch}")
        if not self.roller_dia > 0:
            raise ConfigurationError(f"roller diameter must be positive, got {self.roller_dia}")

    @property
    def x(self) -> float:
        return self.center[0]

    @property
    def y(self) -> float:
        return self.center[1]

    @property
    def circumradius(self) -> float:
        return circumradius(self.teeth, self.pitch)

    @property
    def pitch_radius(self) -> float:
        return pitch_radius(self.teeth, self.pitch)

    @property
    def pitch_circle(self) -> PitchCircle:
        return PitchCircle(self.center, self.pitch_radius)
