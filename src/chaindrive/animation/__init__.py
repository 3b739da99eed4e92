"""Frame-driven animation of a drivetrain."""

from .clock import FrameClock
from .controller import DriveController

__all__ = ["FrameClock", "DriveController"]
