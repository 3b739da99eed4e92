"""Pydantic models for drive configuration parsing and validation."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..errors import ConfigurationError
from .geometry import SprocketSpec, pitch_radius

# Degrees per millisecond for one revolution per minute (360 / 60000)
RPM_RATE = 0.006


class SprocketPlacement(BaseModel):
    """Tooth count and centre of one sprocket."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    teeth: int = Field(ge=3, alias="t", description="Number of teeth")
    x: float = Field(default=0.0, description="Centre x (slave: relative to master)")
    y: float = Field(default=0.0, description="Centre y (slave: relative to master)")


class DriveSpec(BaseModel):
    """Top-level configuration of a two-sprocket chain drive."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    pitch: float = Field(default=12.7, gt=0, description="Chain pitch (link length)")
    roller_dia: float = Field(default=7.93, gt=0, alias="rollerDia", description="Roller diameter")
    speed: float = Field(default=20.0, ge=0, description="Rider cadence in RPM")
    rpm_rate: float = Field(
        default=RPM_RATE, ge=0, alias="rpmRate", description="Degrees per millisecond per RPM"
    )
    init_angle: float = Field(default=0.0, alias="initAngle", description="Initial chainring angle")
    master: SprocketPlacement = Field(
        default_factory=lambda: SprocketPlacement(teeth=44, x=802.0, y=745.0)
    )
    slave: SprocketPlacement = Field(
        default_factory=lambda: SprocketPlacement(teeth=18, x=430.0, y=-81.0)
    )
    width: float = Field(default=1500.0, gt=0, description="Scene width")
    height: float = Field(default=1200.0, gt=0, description="Scene height")

    @model_validator(mode="after")
    def validate_common_tangent(self) -> "DriveSpec":
        distance = math.hypot(self.slave.x, self.slave.y)
        rd = pitch_radius(self.master.teeth, self.pitch) - pitch_radius(self.slave.teeth, self.pitch)
        if distance == 0 or distance < abs(rd):
            raise ValueError(
                "slave pitch circle encloses or coincides with the master pitch circle; "
                "no common chain tangent exists"
            )
        return self

    @property
    def slave_center(self) -> tuple[float, float]:
        """Absolute centre of the slave sprocket."""
        return (self.master.x + self.slave.x, self.master.y + self.slave.y)

    @property
    def gear_ratio(self) -> float:
        return self.master.teeth / self.slave.teeth

    def master_sprocket(self) -> SprocketSpec:
        return SprocketSpec(
            teeth=self.master.teeth,
            pitch=self.pitch,
            roller_dia=self.roller_dia,
            center=(self.master.x, self.master.y),
        )

    def slave_sprocket(self) -> SprocketSpec:
        return SprocketSpec(
            teeth=self.slave.teeth,
            pitch=self.pitch,
            roller_dia=self.roller_dia,
            center=self.slave_center,
        )

    def replace(self, **changes: Any) -> "DriveSpec":
        """Return a revalidated copy with ``changes`` applied.

        ``master`` and ``slave`` changes are merged into the existing
        placement, so ``replace(master={"teeth": 50})`` keeps the centre.
        """
        data = self.model_dump()
        for key, value in changes.items():
            if key in ("master", "slave") and isinstance(value, Mapping):
                data[key] = {**data[key], **value}
            else:
                data[key] = value
        return load_spec(data)


def load_spec(data: Mapping[str, Any] | None) -> DriveSpec:
    """Validate raw configuration data, raising ConfigurationError on failure."""
    try:
        return DriveSpec.model_validate(dict(data or {}))
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e


def load_spec_file(path: Path) -> DriveSpec:
    """Load and validate a YAML drive configuration."""
    with open(path) as f:
        spec_data = yaml.safe_load(f)
    return load_spec(spec_data)
