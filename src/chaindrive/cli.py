"""CLI entry point for the chain-drive animation."""

import logging
from pathlib import Path
from typing import List

import typer

from .errors import ConfigurationError

app = typer.Typer(
    name="chaindrive",
    help="Bicycle chain-drive geometry - builds, steps and exports sprocket/chain frames",
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Log drivetrain rebuilds"),
) -> None:
    """Configure logging for all commands."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load(spec_file: Path):
    from .models.spec import load_spec_file

    if not spec_file.exists():
        typer.echo(f"Error: Specification file not found: {spec_file}", err=True)
        raise typer.Exit(1)

    try:
        return load_spec_file(spec_file)
    except ConfigurationError as e:
        typer.echo(f"Validation error: {e}", err=True)
        raise typer.Exit(1)


def _parse_formats(formats: str) -> List[str]:
    return [fmt.strip().lower() for fmt in formats.split(",") if fmt.strip()]


@app.command()
def validate(
    spec_file: Path = typer.Argument(..., help="Path to YAML drive configuration"),
) -> None:
    """Validate a drive configuration and report its geometry."""
    from .drivetrain import DriveTrain

    typer.echo(f"Validating specification from {spec_file}...")
    spec = _load(spec_file)
    train = DriveTrain(spec)
    summary = train.describe()

    typer.echo(f"Specification valid: {spec.master.teeth}/{spec.slave.teeth}, pitch {spec.pitch}")
    for role, info in summary["sprockets"].items():
        typer.echo(
            f"  {role}: {info['teeth']} teeth, pitch radius {info['pitch_radius']:.2f}, "
            f"circumradius {info['circumradius']:.2f}"
        )
    for name, info in summary["chains"].items():
        typer.echo(f"  {name}: length {info['length']:.2f}, {info['links']} links")
    typer.echo(f"  Gear ratio: {summary['gear_ratio']:.3f}")


@app.command()
def render(
    spec_file: Path = typer.Argument(..., help="Path to YAML drive configuration"),
    output_dir: Path = typer.Option(
        Path("output"), "-o", "--output", help="Output directory for generated files"
    ),
    time: float = typer.Option(0.0, "-t", "--time", help="Elapsed time in milliseconds"),
    debug: bool = typer.Option(False, "--debug", help="Overlay tangent lines and pitch circles"),
    formats: str = typer.Option("svg,json", "--formats", help="Comma-separated export formats (svg,json)"),
) -> None:
    """Render a single frame of the drivetrain."""
    from .drivetrain import DriveTrain
    from .export.exporter import Exporter

    spec = _load(spec_file)
    train = DriveTrain(spec)
    if time:
        train.step(time)

    try:
        exporter = Exporter(output_dir, _parse_formats(formats))
        outputs = exporter.export(train.scene(debug=debug), summary=train.describe())
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    for name, path in outputs.items():
        typer.echo(f"  {name}: {path}")
    typer.echo(f"Frame exported to {output_dir}")


@app.command()
def simulate(
    spec_file: Path = typer.Argument(..., help="Path to YAML drive configuration"),
    frames: int = typer.Option(10, "-n", "--frames", min=1, help="Number of frames to step"),
    dt: float = typer.Option(1000 / 60, "--dt", min=0.0, help="Milliseconds per frame"),
) -> None:
    """Step the drivetrain frame by frame and print the sprocket angles."""
    from .animation import DriveController

    spec = _load(spec_file)
    controller = DriveController(spec)

    typer.echo(f"{'frame':>6} {'time':>10} {'master':>12} {'slave':>12}")
    for frame in range(1, frames + 1):
        timestamp = frame * dt
        controller.tick(timestamp)
        master, slave = controller.train.angles
        typer.echo(f"{frame:>6} {timestamp:>10.2f} {master:>12.3f} {slave:>12.3f}")


@app.command()
def ratio(
    spec_file: Path = typer.Argument(..., help="Path to YAML drive configuration"),
) -> None:
    """Print the gear ratio of a configuration."""
    spec = _load(spec_file)
    typer.echo(f"Gear ratio: {spec.master.teeth}/{spec.slave.teeth} = {spec.gear_ratio:.3f}")
    typer.echo(f"  Slave turns per crank revolution: {spec.gear_ratio:.3f}")
    typer.echo(f"  Slave degrees per crank revolution: {360 * spec.gear_ratio:.1f}")


if __name__ == "__main__":
    app()
