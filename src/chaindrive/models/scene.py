"""Declarative scene graph produced by the drivetrain.

The drivetrain never draws pixels. It describes what to draw as a tree of
primitive shapes and transformed groups, which an external surface (or the
SVG writer in :mod:`chaindrive.export`) turns into an image.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, Optional, Tuple, Union

from .geometry import Point

WHITE = "#fff"
BLACK = "#000"
NONE = "none"


def _point(p: Point) -> list[float]:
    return [float(p[0]), float(p[1])]


@dataclass(frozen=True)
class Polygon:
    """Closed filled polygon."""

    points: Tuple[Point, ...]
    fill: str = BLACK

    def to_dict(self) -> dict:
        return {"type": "polygon", "points": [_point(p) for p in self.points], "fill": self.fill}


@dataclass(frozen=True)
class Circle:
    """Circle given by centre and radius, optionally stroked."""

    center: Point
    radius: float
    fill: str = BLACK
    stroke: Optional[str] = None
    stroke_width: float = 0.0

    def to_dict(self) -> dict:
        data = {
            "type": "circle",
            "center": _point(self.center),
            "radius": self.radius,
            "fill": self.fill,
        }
        if self.stroke is not None:
            data["stroke"] = self.stroke
            data["stroke_width"] = self.stroke_width
        return data


@dataclass(frozen=True)
class Line:
    """Stroked line segment."""

    start: Point
    end: Point
    stroke: str = BLACK
    width: float = 1.0

    def to_dict(self) -> dict:
        return {
            "type": "line",
            "start": _point(self.start),
            "end": _point(self.end),
            "stroke": self.stroke,
            "width": self.width,
        }


Shape = Union[Polygon, Circle, Line]


@dataclass(frozen=True)
class Mask:
    """Luminance mask: white shapes reveal, black shapes hide.

    Shapes are painted in order, so a later black shape cuts into an
    earlier white one and a later white shape restores it.
    """

    shapes: Tuple[Shape, ...]

    def to_dict(self) -> dict:
        return {"type": "mask", "shapes": [s.to_dict() for s in self.shapes]}


@dataclass(frozen=True)
class Group:
    """Named group of nodes with an optional transform and mask.

    The transform is a rotation (degrees) about ``pivot`` followed by a
    translation. The mask is expressed in the parent's coordinates and does
    not follow the group's own transform.
    """

    name: str
    children: Tuple["Node", ...] = ()
    rotation: float = 0.0
    pivot: Point = (0.0, 0.0)
    translation: Point = (0.0, 0.0)
    mask: Optional[Mask] = None

    @property
    def is_transformed(self) -> bool:
        return self.rotation != 0.0 or self.translation != (0.0, 0.0)

    def rotated(self, angle: float, pivot: Point) -> "Group":
        return replace(self, rotation=angle, pivot=pivot)

    def translated(self, dx: float, dy: float) -> "Group":
        return replace(self, translation=(dx, dy))

    def masked(self, mask: Optional[Mask]) -> "Group":
        return replace(self, mask=mask)

    def walk(self) -> Iterator["Node"]:
        """Yield this group and every descendant, depth first."""
        yield self
        for child in self.children:
            if isinstance(child, Group):
                yield from child.walk()
            else:
                yield child

    def find(self, name: str) -> Optional["Group"]:
        """Return the first descendant group called ``name``."""
        for node in self.walk():
            if isinstance(node, Group) and node.name == name:
                return node
        return None

    def to_dict(self) -> dict:
        data = {
            "type": "group",
            "name": self.name,
            "children": [c.to_dict() for c in self.children],
        }
        if self.rotation:
            data["rotation"] = self.rotation
            data["pivot"] = _point(self.pivot)
        if self.translation != (0.0, 0.0):
            data["translation"] = _point(self.translation)
        if self.mask is not None:
            data["mask"] = self.mask.to_dict()
        return data


Node = Union[Polygon, Circle, Line, Group]


@dataclass(frozen=True)
class Scene:
    """Root of a rendered frame in a ``width`` x ``height`` coordinate space."""

    width: float
    height: float
    root: Group

    def find(self, name: str) -> Optional[Group]:
        return self.root.find(name)

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height, "root": self.root.to_dict()}
