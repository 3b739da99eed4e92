"""Tests for drive configuration parsing and validation."""

import pytest

from chaindrive.errors import ConfigurationError
from chaindrive.models.geometry import SprocketSpec
from chaindrive.models.spec import DriveSpec, SprocketPlacement, load_spec, load_spec_file


@pytest.fixture
def valid_spec_data():
    """Return valid configuration data using the camelCase keys."""
    return {
        "pitch": 12.7,
        "rollerDia": 7.93,
        "speed": 20,
        "rpmRate": 0.006,
        "master": {"t": 44, "x": 802, "y": 745},
        "slave": {"t": 18, "x": 430, "y": -81},
        "width": 1500,
        "height": 1200,
    }


class TestSprocketPlacement:
    """Tests for SprocketPlacement validation."""

    def test_alias_and_field_name(self):
        assert SprocketPlacement(t=44).teeth == 44
        assert SprocketPlacement(teeth=44).teeth == 44

    def test_too_few_teeth(self):
        with pytest.raises(ValueError):
            SprocketPlacement(teeth=2)


class TestSprocketSpec:
    """Tests for SprocketSpec validation."""

    def test_valid_sprocket(self):
        spec = SprocketSpec(teeth=18, pitch=12.7, roller_dia=7.93, center=(10.0, 20.0))
        assert spec.x == 10.0
        assert spec.y == 20.0
        assert spec.pitch_circle.radius == pytest.approx(spec.pitch_radius)

    @pytest.mark.parametrize("teeth", [0, 1, 2, -5])
    def test_too_few_teeth(self, teeth):
        with pytest.raises(ConfigurationError, match="at least 3 teeth"):
            SprocketSpec(teeth=teeth, pitch=12.7, roller_dia=7.93)

    def test_non_integer_teeth(self):
        with pytest.raises(ConfigurationError):
            SprocketSpec(teeth=18.5, pitch=12.7, roller_dia=7.93)
        with pytest.raises(ConfigurationError):
            SprocketSpec(teeth=True, pitch=12.7, roller_dia=7.93)

    @pytest.mark.parametrize("pitch", [0.0, -12.7])
    def test_non_positive_pitch(self, pitch):
        with pytest.raises(ConfigurationError, match="pitch"):
            SprocketSpec(teeth=18, pitch=pitch, roller_dia=7.93)

    def test_non_positive_roller(self):
        with pytest.raises(ConfigurationError, match="roller"):
            SprocketSpec(teeth=18, pitch=12.7, roller_dia=0.0)


class TestDriveSpec:
    """Tests for full DriveSpec validation."""

    def test_defaults_are_valid(self):
        spec = DriveSpec()
        assert spec.master.teeth == 44
        assert spec.slave.teeth == 18
        assert spec.pitch == 12.7

    def test_valid_spec(self, valid_spec_data):
        spec = load_spec(valid_spec_data)
        assert spec.roller_dia == 7.93
        assert spec.rpm_rate == 0.006
        assert spec.slave_center == (1232.0, 664.0)
        assert spec.gear_ratio == pytest.approx(44 / 18)

    def test_snake_case_keys(self, valid_spec_data):
        data = dict(valid_spec_data)
        data["roller_dia"] = data.pop("rollerDia")
        data["master"] = {"teeth": 44, "x": 802, "y": 745}
        assert load_spec(data).roller_dia == 7.93

    def test_sprocket_specs(self, valid_spec_data):
        spec = load_spec(valid_spec_data)
        master = spec.master_sprocket()
        slave = spec.slave_sprocket()
        assert master.center == (802.0, 745.0)
        assert slave.center == (1232.0, 664.0)
        assert master.pitch == slave.pitch == 12.7

    def test_invalid_teeth(self, valid_spec_data):
        valid_spec_data["slave"]["t"] = 2
        with pytest.raises(ConfigurationError):
            load_spec(valid_spec_data)

    def test_invalid_pitch(self, valid_spec_data):
        valid_spec_data["pitch"] = 0
        with pytest.raises(ConfigurationError):
            load_spec(valid_spec_data)

    def test_negative_speed(self, valid_spec_data):
        valid_spec_data["speed"] = -1
        with pytest.raises(ConfigurationError):
            load_spec(valid_spec_data)

    def test_enclosed_slave(self, valid_spec_data):
        # 44T pitch radius ~88.8, 18T ~36.0: a 10mm offset puts the cog inside
        valid_spec_data["slave"].update(x=10, y=0)
        with pytest.raises(ConfigurationError, match="encloses"):
            load_spec(valid_spec_data)

    def test_coincident_centres(self, valid_spec_data):
        valid_spec_data["slave"].update(t=44, x=0, y=0)
        with pytest.raises(ConfigurationError):
            load_spec(valid_spec_data)

    def test_empty_data_uses_defaults(self):
        assert load_spec(None) == DriveSpec()


class TestReplace:
    """Tests for DriveSpec.replace."""

    def test_replace_merges_placement(self):
        spec = DriveSpec()
        changed = spec.replace(master={"teeth": 50})
        assert changed.master.teeth == 50
        assert changed.master.x == spec.master.x
        assert changed.master.y == spec.master.y
        assert spec.master.teeth == 44

    def test_replace_scalar(self):
        assert DriveSpec().replace(speed=90).speed == 90

    def test_replace_revalidates(self):
        spec = DriveSpec()
        with pytest.raises(ConfigurationError):
            spec.replace(slave={"teeth": 1})
        assert spec.slave.teeth == 18


class TestLoadSpecFile:
    """Tests for loading YAML files."""

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "drive.yaml"
        path.write_text(
            "pitch: 12.7\n"
            "rollerDia: 7.93\n"
            "master: {t: 45, x: 700, y: 700}\n"
            "slave: {t: 16, x: 520, y: 0}\n"
        )
        spec = load_spec_file(path)
        assert spec.master.teeth == 45
        assert spec.slave_center == (1220.0, 700.0)

    def test_load_invalid_yaml(self, tmp_path):
        path = tmp_path / "drive.yaml"
        path.write_text("master: {t: 2}\n")
        with pytest.raises(ConfigurationError):
            load_spec_file(path)
