"""Sprockets and the chain links wrapped around them.

A sprocket is either driving (the chainring, advanced by elapsed time) or
driven (the rear cog, slaved to the chainring through the teeth ratio).
The role is fixed by the class, and :class:`DriverAssembly` pairs one of
each.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, List, Optional, Tuple

from ..models.geometry import PitchCircle, Point, SprocketSpec
from ..models.scene import BLACK, WHITE, Circle, Group, Line, Mask, Polygon, Shape
from ..models.spec import DriveSpec
from .primitives import phase, polygon_points, to_deg

logger = logging.getLogger(__name__)

LINK_COLOR_1 = "#aaa"
LINK_COLOR_2 = "#666"
CHAINRING_COLOR = "#232323"
SPROCKET_COLOR = "#d6d6d6"

BODY_PADDING = 3.0          # Body polygon radius beyond the circumradius
TOOTH_RATIO = 1.4           # Tooth gap diameter / roller diameter
PLATE_RATIO = 0.7           # Link plate stroke width / roller diameter
PIN_RATIO = 0.35            # Pin diameter / roller diameter
CUTOUT_MARGIN_RATIO = 0.4   # Solid rim width of the cut-out disc, as a fraction of cr
CUTOUT_INSET = 5.0          # Spoke ring inset from cr, and spoke ring inner radius
SPOKE_RING_POINTS = 20
SPOKE_STEP = 4
HUB_DIAMETER = 50.0


class SprocketRole(Enum):
    """How a sprocket gets its angle."""

    DRIVER = "driver"
    DRIVEN = "driven"


class WrapLinks:
    """Ring of chain links wrapped around a sprocket.

    Links sit on the circumradius polygon. The ring is only ever rotated
    within one link (two teeth) of travel, so the drawn links stay put on
    the teeth while the sprocket body turns underneath them.
    """

    def __init__(self, sprocket: "Sprocket"):
        self.sprocket = sprocket
        spec = sprocket.spec
        self.points = polygon_points(spec.circumradius, spec.teeth, spec.x, spec.y)
        # One chain link spans two teeth
        self.arc_step = to_deg((math.pi * 2) / spec.teeth * 2)
        if sprocket.role is SprocketRole.DRIVEN:
            self.odd_offset = 0.0
            self.rot_offset = self.arc_step * math.ceil(spec.teeth / 4)
        else:
            # Odd chainrings start half a link round
            self.odd_offset = self.arc_step / 2 if spec.teeth % 2 else 0.0
            self.rot_offset = 0.0
        self.shapes = self._build_links()
        self.rotation = 0.0
        self.mesh()

    def _build_links(self) -> Tuple[Shape, ...]:
        roll = self.sprocket.roller_dia
        points = self.points
        shapes: List[Shape] = []
        for i in range(2, len(points), 2):
            shapes.append(Line(points[i], points[i - 1], LINK_COLOR_2, roll * PLATE_RATIO))
            shapes.append(Line(points[i - 1], points[i - 2], LINK_COLOR_1, roll * PLATE_RATIO))
        for point in points:
            shapes.append(Circle(point, roll / 2, LINK_COLOR_1))
            shapes.append(Circle(point, roll * PIN_RATIO / 2, LINK_COLOR_2))
        return tuple(shapes)

    def mesh(self) -> None:
        self.rotation = phase(self.sprocket.angle, self.arc_step) + self.odd_offset + self.rot_offset

    def render(self, mask: Optional[Mask] = None) -> Group:
        name = f"{self.sprocket.name}-links"
        links = Group(f"{name}-ring", self.shapes).rotated(self.rotation, self.sprocket.center)
        return Group(name, (links,)).masked(mask)


class Sprocket:
    """Toothed wheel with its body geometry and wrap-link ring.

    Not instantiated directly; use :class:`DriveSprocket` or
    :class:`DrivenSprocket`.
    """

    role: ClassVar[SprocketRole]

    def __init__(self, spec: SprocketSpec, name: str, angle: float = 0.0, color: str = CHAINRING_COLOR):
        self.spec = spec
        self.name = name
        self.angle = angle  # Degrees, unbounded
        self.color = color
        self.points = polygon_points(self.cr + BODY_PADDING, spec.teeth, spec.x, spec.y)
        self._body, self._body_mask = self._build_body()
        self.links = WrapLinks(self)

    @property
    def teeth(self) -> int:
        return self.spec.teeth

    @property
    def pitch(self) -> float:
        return self.spec.pitch

    @property
    def roller_dia(self) -> float:
        return self.spec.roller_dia

    @property
    def center(self) -> Point:
        return self.spec.center

    @property
    def x(self) -> float:
        return self.spec.x

    @property
    def y(self) -> float:
        return self.spec.y

    @property
    def cr(self) -> float:
        """Circumradius, used for drawing the body and links."""
        return self.spec.circumradius

    @property
    def r(self) -> float:
        """Pitch radius, used for distances and chain travel."""
        return self.spec.pitch_radius

    @property
    def pitch_circle(self) -> PitchCircle:
        return self.spec.pitch_circle

    def _build_body(self) -> Tuple[Polygon, Mask]:
        outer = self.cr + BODY_PADDING
        shapes: List[Shape] = [Circle(self.center, outer, WHITE)]
        # Punch out circles at the polygon vertices to give the look of teeth
        for point in self.points:
            shapes.append(Circle(point, self.roller_dia * TOOTH_RATIO / 2, BLACK))
        shapes.extend(self._cutouts(self.cr * CUTOUT_MARGIN_RATIO))
        return Polygon(tuple(self.points), self.color), Mask(tuple(shapes))

    def _cutouts(self, margin: float) -> List[Shape]:
        """Spoked cut-out: a hidden disc with spokes and a hub restored."""
        outer = polygon_points(self.cr - CUTOUT_INSET, SPOKE_RING_POINTS, self.x, self.y)
        inner = polygon_points(CUTOUT_INSET, SPOKE_RING_POINTS, self.x, self.y)
        shapes: List[Shape] = [Circle(self.center, self.cr - margin, BLACK)]
        for i in range(len(outer) - 1, 0, -SPOKE_STEP):
            spoke = (outer[i], outer[i - 1], inner[i - 1], inner[i])
            shapes.append(Polygon(spoke, WHITE))
        shapes.append(Circle(self.center, HUB_DIAMETER / 2, WHITE))
        return shapes

    def render(self) -> Group:
        """Body group rotated to the current angle."""
        body = Group(f"{self.name}-body", (self._body,)).masked(self._body_mask)
        return Group(self.name, (body,)).rotated(self.angle, self.center)


class DriveSprocket(Sprocket):
    """Sprocket advanced by elapsed time at its own speed."""

    role = SprocketRole.DRIVER

    def __init__(
        self,
        spec: SprocketSpec,
        name: str = "chainring",
        angle: float = 0.0,
        rpm_rate: float = 0.0,
        color: str = CHAINRING_COLOR,
    ):
        super().__init__(spec, name, angle, color)
        self.rpm_rate = rpm_rate
        self.speed = 0.0  # Degrees per millisecond

    def advance(self, dt: float) -> None:
        self.angle += dt * self.speed
        self.links.mesh()

    def set_speed(self, rpm: float) -> None:
        # Pedalling forwards turns the drivetrain towards negative angles
        self.speed = rpm * self.rpm_rate * -1


class DrivenSprocket(Sprocket):
    """Sprocket whose angle is locked to a driver by the teeth ratio."""

    role = SprocketRole.DRIVEN

    def __init__(self, spec: SprocketSpec, name: str = "cog", angle: float = 0.0, color: str = SPROCKET_COLOR):
        super().__init__(spec, name, angle, color)

    def mesh(self, driver: DriveSprocket) -> None:
        self.angle = driver.angle * (driver.teeth / self.teeth)
        self.links.mesh()


@dataclass
class DriverAssembly:
    """Chainring and rear cog on the fixed two-sprocket layout."""

    chainring: DriveSprocket
    cog: DrivenSprocket

    @classmethod
    def create(cls, spec: DriveSpec) -> "DriverAssembly":
        # Build both specs first so an invalid cog never leaves a half-built pair
        chainring_spec = spec.master_sprocket()
        cog_spec = spec.slave_sprocket()
        logger.debug(
            "Building sprockets: %d teeth at %s, %d teeth at %s",
            chainring_spec.teeth, chainring_spec.center, cog_spec.teeth, cog_spec.center,
        )
        chainring = DriveSprocket(chainring_spec, angle=spec.init_angle, rpm_rate=spec.rpm_rate)
        cog = DrivenSprocket(cog_spec)
        return cls(chainring=chainring, cog=cog)

    @property
    def ratio(self) -> float:
        """Gear ratio, chainring teeth over cog teeth."""
        return self.chainring.teeth / self.cog.teeth

    def mesh(self) -> None:
        self.cog.mesh(self.chainring)
