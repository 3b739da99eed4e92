#!/usr/bin/env python3
"""Render a sequence of drivetrain animation frames.

Usage:
    python render_frames.py [--spec SPEC] [--output DIR] [--frames N] [--fps FPS]

Examples:
    python render_frames.py
    python render_frames.py --frames 120 --fps 30 --output frames_30fps
    python render_frames.py --spec examples/single_speed_45_16.yaml --debug
"""

import argparse
import sys
from pathlib import Path

from src.chaindrive.animation import DriveController
from src.chaindrive.errors import ConfigurationError
from src.chaindrive.export.exporter import Exporter
from src.chaindrive.models.spec import load_spec_file


def render(spec_file: Path, output_dir: Path, frames: int, fps: float, debug: bool = False):
    """Tick a controller at a fixed frame rate and export every frame."""
    print(f"Loading specification from {spec_file}...")
    try:
        spec = load_spec_file(spec_file)
    except ConfigurationError as e:
        print(f"Error: {e}")
        sys.exit(1)

    controller = DriveController(spec)
    exporter = Exporter(output_dir, ["svg"])
    frame_time = 1000.0 / fps

    print(f"Rendering {frames} frames at {fps:g} fps...")
    for frame in range(frames):
        controller.tick(frame * frame_time)
        exporter.export(controller.train.scene(debug=debug), name=f"frame_{frame:04d}")

    summary = controller.train.describe()
    print(f"\nRendered: {spec.master.teeth}/{spec.slave.teeth} drivetrain")
    print(f"  Output: {exporter.frames_dir}")
    print(f"  Gear ratio: {summary['gear_ratio']:.3f}")
    master, slave = controller.train.angles
    print(f"  Final angles: master {master:.2f}, slave {slave:.2f}")


def main():
    parser = argparse.ArgumentParser(
        description="Render drivetrain animation frames",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "-s", "--spec",
        type=Path,
        default=Path("examples/bicycle_44_18.yaml"),
        help="Path to YAML drive configuration (default: examples/bicycle_44_18.yaml)",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=Path("frames"),
        help="Output directory (default: frames)",
    )
    parser.add_argument(
        "-n", "--frames",
        type=int,
        default=60,
        help="Number of frames to render (default: 60)",
    )
    parser.add_argument(
        "--fps",
        type=float,
        default=60.0,
        help="Frames per second (default: 60)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Overlay tangent lines and pitch circles",
    )

    args = parser.parse_args()

    if not args.spec.exists():
        print(f"Error: Specification file not found: {args.spec}")
        sys.exit(1)

    render(args.spec, args.output, args.frames, args.fps, args.debug)


if __name__ == "__main__":
    main()
