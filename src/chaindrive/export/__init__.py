"""Frame export to SVG and JSON."""

from .exporter import Exporter, SvgWriter, scene_to_svg

__all__ = ["Exporter", "SvgWriter", "scene_to_svg"]
