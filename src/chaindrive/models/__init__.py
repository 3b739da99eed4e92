"""Data models for the chain-drive animation."""

from .spec import DriveSpec, SprocketPlacement, load_spec, load_spec_file
from .geometry import PitchCircle, Point, SprocketSpec, TangentLine
from .scene import Circle, Group, Line, Mask, Polygon, Scene

__all__ = [
    "DriveSpec",
    "SprocketPlacement",
    "load_spec",
    "load_spec_file",
    "PitchCircle",
    "Point",
    "SprocketSpec",
    "TangentLine",
    "Circle",
    "Group",
    "Line",
    "Mask",
    "Polygon",
    "Scene",
]
