"""Tests for the command line interface."""

import pytest
from typer.testing import CliRunner

from chaindrive.cli import app

runner = CliRunner()


@pytest.fixture
def spec_file(tmp_path):
    path = tmp_path / "drive.yaml"
    path.write_text(
        "pitch: 12.7\n"
        "rollerDia: 7.93\n"
        "speed: 20\n"
        "master: {t: 44, x: 802, y: 745}\n"
        "slave: {t: 18, x: 430, y: -81}\n"
    )
    return path


@pytest.fixture
def bad_spec_file(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("master: {t: 2, x: 0, y: 0}\n")
    return path


class TestValidate:
    def test_valid(self, spec_file):
        result = runner.invoke(app, ["validate", str(spec_file)])
        assert result.exit_code == 0
        assert "Specification valid: 44/18" in result.output
        assert "chain-upper" in result.output
        assert "Gear ratio: 2.444" in result.output

    def test_invalid(self, bad_spec_file):
        result = runner.invoke(app, ["validate", str(bad_spec_file)])
        assert result.exit_code == 1

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["validate", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 1


class TestRender:
    def test_render_frame(self, spec_file, tmp_path):
        out = tmp_path / "out"
        result = runner.invoke(app, ["render", str(spec_file), "-o", str(out), "--time", "500", "--debug"])
        assert result.exit_code == 0
        assert (out / "frames" / "frame.svg").exists()
        assert (out / "frames" / "frame.json").exists()
        assert (out / "manifest.json").exists()

    def test_render_bad_format(self, spec_file, tmp_path):
        result = runner.invoke(app, ["render", str(spec_file), "-o", str(tmp_path), "--formats", "png"])
        assert result.exit_code == 1


class TestSimulate:
    def test_prints_frames(self, spec_file):
        result = runner.invoke(app, ["simulate", str(spec_file), "--frames", "3", "--dt", "1000"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 4
        # 20 RPM: -120 degrees per second on the chainring
        assert "-360.000" in lines[-1]
        assert "-880.000" in lines[-1]


class TestRatio:
    def test_ratio(self, spec_file):
        result = runner.invoke(app, ["ratio", str(spec_file)])
        assert result.exit_code == 0
        assert "44/18 = 2.444" in result.output
        assert "880.0" in result.output
