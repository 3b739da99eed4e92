"""Sprocket, chain and drivetrain geometry."""

from .primitives import angle_between, phase, polygon_points, tangent_line, to_deg, to_rad
from .sprocket import (
    DriverAssembly,
    DrivenSprocket,
    DriveSprocket,
    Sprocket,
    SprocketRole,
    WrapLinks,
)
from .chain import ChainSegment
from .wrap_mask import WrapMask
from .overlay import DebugOverlay
from .train import DriveTrain

__all__ = [
    # Primitives
    "angle_between",
    "phase",
    "polygon_points",
    "tangent_line",
    "to_deg",
    "to_rad",
    # Components
    "DriverAssembly",
    "DrivenSprocket",
    "DriveSprocket",
    "Sprocket",
    "SprocketRole",
    "WrapLinks",
    "ChainSegment",
    "WrapMask",
    "DebugOverlay",
    "DriveTrain",
]
