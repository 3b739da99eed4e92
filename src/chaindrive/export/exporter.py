"""Export functionality for SVG/JSON frames."""

from __future__ import annotations

import itertools
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import svgwrite

from ..models.scene import Circle, Group, Line, Mask, Node, Polygon, Scene


class SvgWriter:
    """Translates a scene graph into an svgwrite drawing."""

    def __init__(self, scene: Scene):
        self.scene = scene
        self._ids = itertools.count(1)

    def drawing(self, filename: str = "frame.svg") -> svgwrite.Drawing:
        dwg = svgwrite.Drawing(filename, size=(self.scene.width, self.scene.height), profile="full")
        dwg.viewbox(0, 0, self.scene.width, self.scene.height)
        dwg.add(self._group(dwg, self.scene.root))
        return dwg

    def _mask(self, dwg: svgwrite.Drawing, mask: Mask):
        element = dwg.mask(id=f"mask-{next(self._ids)}")
        for shape in mask.shapes:
            element.add(self._shape(dwg, shape))
        dwg.defs.add(element)
        return element

    def _group(self, dwg: svgwrite.Drawing, group: Group):
        element = dwg.g(id=group.name)
        target = element
        if group.mask is not None:
            element["mask"] = self._mask(dwg, group.mask).get_funciri()
            # The mask stays in parent coordinates, so the transform goes on
            # an inner group
            if group.is_transformed:
                target = dwg.g()
                element.add(target)
        if group.translation != (0.0, 0.0):
            target.translate(*group.translation)
        if group.rotation:
            target.rotate(group.rotation, center=group.pivot)
        for child in group.children:
            target.add(self._node(dwg, child))
        return element

    def _node(self, dwg: svgwrite.Drawing, node: Node):
        if isinstance(node, Group):
            return self._group(dwg, node)
        return self._shape(dwg, node)

    def _shape(self, dwg: svgwrite.Drawing, shape):
        if isinstance(shape, Polygon):
            return dwg.polygon(points=list(shape.points), fill=shape.fill)
        if isinstance(shape, Circle):
            extra = {}
            if shape.stroke is not None:
                extra = {"stroke": shape.stroke, "stroke_width": shape.stroke_width}
            return dwg.circle(center=shape.center, r=shape.radius, fill=shape.fill, **extra)
        if isinstance(shape, Line):
            return dwg.line(start=shape.start, end=shape.end, stroke=shape.stroke, stroke_width=shape.width)
        raise TypeError(f"Unsupported scene node: {type(shape).__name__}")


def scene_to_svg(scene: Scene) -> str:
    """Render ``scene`` to an SVG document string."""
    return SvgWriter(scene).drawing().tostring()


class Exporter:
    """Exports drivetrain frames to various formats."""

    def __init__(self, output_dir: Path, formats: Optional[List[str]] = None):
        """Initialize exporter.

        Args:
            output_dir: Directory to write output files
            formats: List of export formats (svg, json). Defaults to both.
        """
        self.output_dir = Path(output_dir)
        self.formats = formats or ["svg", "json"]

        self.frames_dir = self.output_dir / "frames"
        self.frames_dir.mkdir(parents=True, exist_ok=True)

    def export(
        self,
        scene: Scene,
        name: str = "frame",
        summary: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Path]:
        """Export one frame, and a manifest if a drivetrain summary is given.

        Args:
            scene: Scene graph of the frame
            name: Base file name of the frame
            summary: Optional drivetrain summary (see ``DriveTrain.describe``)

        Returns:
            Dict mapping output name to file path
        """
        outputs: dict[str, Path] = {}

        for fmt in self.formats:
            path = self._export_frame(scene, name, fmt)
            outputs[f"{name}.{fmt}"] = path

        if summary is not None:
            outputs["manifest.json"] = self._export_manifest(scene, name, summary)

        return outputs

    def _export_frame(self, scene: Scene, name: str, fmt: str) -> Path:
        """Export a single frame."""
        path = self.frames_dir / f"{name}.{fmt}"

        if fmt == "svg":
            SvgWriter(scene).drawing(str(path)).save(pretty=True)
        elif fmt == "json":
            with open(path, "w") as f:
                json.dump(scene.to_dict(), f, indent=2)
        else:
            raise ValueError(f"Unsupported format: {fmt}")

        return path

    def _export_manifest(self, scene: Scene, name: str, summary: Dict[str, Any]) -> Path:
        """Export frame manifest with the drivetrain geometry."""
        path = self.output_dir / "manifest.json"

        manifest: dict[str, Any] = {
            "frame": name,
            "files": {fmt: f"frames/{name}.{fmt}" for fmt in self.formats},
            "coordinate_frame": {
                "width": scene.width,
                "height": scene.height,
                "y_axis": "down",
                "angles": "degrees",
                "units": "mm",
            },
            "drivetrain": summary,
        }

        with open(path, "w") as f:
            json.dump(manifest, f, indent=2)

        return path
