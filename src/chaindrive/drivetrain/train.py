"""Complete two-sprocket drivetrain stepped once per animation frame."""

from __future__ import annotations

import logging
from typing import Any, Dict, Tuple

from ..models.scene import Group, Scene
from ..models.spec import DriveSpec
from .chain import ChainSegment
from .overlay import DebugOverlay
from .sprocket import DriverAssembly, DrivenSprocket, DriveSprocket
from .wrap_mask import WrapMask

logger = logging.getLogger(__name__)


class DriveTrain:
    """Chainring, rear cog and the two chain runs between them.

    Built in two phases: first the sprockets and chain segments, which are
    pure geometry, then the wrap mask composed from the finished tangent
    endpoints. Any change to teeth, pitch or placement goes through
    :meth:`reset`, which rebuilds everything.
    """

    def __init__(self, spec: DriveSpec):
        self.reset(spec)

    def reset(self, spec: DriveSpec) -> None:
        """Discard all state and rebuild from ``spec``."""
        logger.debug("Resetting drivetrain: %d/%d teeth, pitch %.2f",
                     spec.master.teeth, spec.slave.teeth, spec.pitch)
        # Build everything before assigning so a failure keeps the old train
        assembly = DriverAssembly.create(spec)
        chainring, cog = assembly.chainring, assembly.cog
        ring_origin = chainring.links.points[0]
        upper = ChainSegment(chainring, cog, ring_origin, flip=True)
        lower = ChainSegment(chainring, cog, ring_origin, flip=False)
        wrap_mask = WrapMask.between(upper, lower)

        self.spec = spec
        self.assembly = assembly
        self.upper = upper
        self.lower = lower
        self.wrap_mask = wrap_mask
        self.master.set_speed(spec.speed)
        self.mesh_all()

    @property
    def master(self) -> DriveSprocket:
        return self.assembly.chainring

    @property
    def slave(self) -> DrivenSprocket:
        return self.assembly.cog

    @property
    def gear_ratio(self) -> float:
        return self.assembly.ratio

    @property
    def angles(self) -> Tuple[float, float]:
        """Current (master, slave) angles in degrees."""
        return self.master.angle, self.slave.angle

    def step(self, dt: float) -> None:
        """Advance the drivetrain by ``dt`` milliseconds."""
        self.master.advance(dt)
        self.mesh_all()

    def mesh_all(self) -> None:
        self.assembly.mesh()
        self.upper.mesh()
        self.lower.mesh()

    def set_speed(self, rpm: float) -> None:
        self.master.set_speed(rpm)

    def scene(self, debug: bool = False) -> Scene:
        """Describe the current frame, back to front."""
        children = [
            self.slave.render(),
            self.master.render(),
            self.master.links.render(self.wrap_mask.for_sprocket(self.master)),
            self.slave.links.render(self.wrap_mask.for_sprocket(self.slave)),
            self.upper.render(),
            self.lower.render(),
        ]
        if debug:
            children.append(DebugOverlay(self).render())
        return Scene(self.spec.width, self.spec.height, Group("drivetrain", tuple(children)))

    def describe(self) -> Dict[str, Any]:
        """Summary of the derived geometry and current state."""
        sprockets = {}
        for role, sprocket in (("master", self.master), ("slave", self.slave)):
            sprockets[role] = {
                "teeth": sprocket.teeth,
                "center": list(sprocket.center),
                "pitch_radius": sprocket.r,
                "circumradius": sprocket.cr,
                "angle": sprocket.angle,
            }
        chains = {}
        for segment in (self.upper, self.lower):
            chains[segment.name] = {
                "length": segment.length,
                "angle": segment.angle,
                "links": segment.link_count,
                "draw_offset": segment.draw_offset,
                "reach": segment.strip_reach,
            }
        return {
            "gear_ratio": self.gear_ratio,
            "speed": self.master.speed,
            "sprockets": sprockets,
            "chains": chains,
        }
