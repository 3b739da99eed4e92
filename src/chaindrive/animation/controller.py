"""Owner of the live drivetrain between animation frames and UI changes."""

from __future__ import annotations

import logging
from typing import Any, Optional

from ..drivetrain import DriveTrain
from ..models.spec import DriveSpec
from .clock import FrameClock

logger = logging.getLogger(__name__)


class DriveController:
    """Single-threaded driver for one drivetrain.

    Ticks and reconfiguration must come from the same loop. Teeth and pitch
    changes replace the configuration and rebuild the drivetrain wholesale;
    speed changes only retune the chainring.
    """

    def __init__(self, spec: Optional[DriveSpec] = None, clock: Optional[FrameClock] = None):
        self.spec = spec or DriveSpec()
        self.clock = clock or FrameClock()
        self.train = DriveTrain(self.spec)

    def tick(self, timestamp: float) -> float:
        """Step the drivetrain to ``timestamp`` and return the elapsed time."""
        dt = self.clock.tick(timestamp)
        self.train.step(dt)
        return dt

    def reconfigure(self, **changes: Any) -> DriveTrain:
        """Apply configuration changes and rebuild the drivetrain.

        The new configuration is validated before the current drivetrain is
        touched, so a rejected change leaves everything as it was.
        """
        spec = self.spec.replace(**changes)
        logger.debug("Reconfiguring drivetrain: %s", changes)
        self.spec = spec
        self.train = DriveTrain(spec)
        return self.train

    def set_master_teeth(self, teeth: int) -> DriveTrain:
        return self.reconfigure(master={"teeth": teeth})

    def set_slave_teeth(self, teeth: int) -> DriveTrain:
        return self.reconfigure(slave={"teeth": teeth})

    def set_pitch(self, pitch: float) -> DriveTrain:
        return self.reconfigure(pitch=pitch)

    def set_speed(self, rpm: float) -> None:
        self.spec = self.spec.replace(speed=rpm)
        self.train.set_speed(rpm)
