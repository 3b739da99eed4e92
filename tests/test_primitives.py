"""Tests for geometry primitives."""

import math

import pytest

from chaindrive.drivetrain.primitives import (
    angle_between,
    phase,
    polygon_points,
    tangent_line,
    to_deg,
    to_rad,
)
from chaindrive.errors import ConfigurationError
from chaindrive.models.geometry import PitchCircle, circumradius, pitch_radius


class TestRadii:
    """Tests for sprocket radius formulas."""

    def test_triangle(self):
        assert circumradius(3, 1.0) == pytest.approx(1 / math.sqrt(3))
        assert pitch_radius(3, 1.0) == pytest.approx(1 / (2 * math.sqrt(3)))

    @pytest.mark.parametrize("pitch", [1.0, 12.7, 25.4])
    def test_ordering_and_growth(self, pitch):
        previous = None
        for teeth in range(3, 120):
            cr = circumradius(teeth, pitch)
            r = pitch_radius(teeth, pitch)
            assert cr > r > 0
            if previous is not None:
                assert cr > previous[0]
                assert r > previous[1]
            previous = (cr, r)


class TestAngles:
    """Tests for degree/radian helpers."""

    def test_conversions(self):
        assert to_rad(180) == pytest.approx(math.pi)
        assert to_deg(math.pi / 2) == pytest.approx(90)
        assert to_deg(to_rad(123.4)) == pytest.approx(123.4)

    def test_phase_keeps_sign(self):
        assert phase(370, 360) == pytest.approx(10)
        assert phase(-370, 360) == pytest.approx(-10)
        assert phase(-10, 360) == pytest.approx(-10)

    def test_angle_between(self):
        assert angle_between((1, 0), (0, 5)) == pytest.approx(math.pi / 2)
        assert angle_between((1, 0), (-2, 0)) == pytest.approx(math.pi)
        assert angle_between((1, 1), (2, 2)) == pytest.approx(0, abs=1e-7)
        assert angle_between((0, 0), (1, 0)) == 0.0


class TestPolygonPoints:
    """Tests for polygon_points."""

    @pytest.mark.parametrize("count", [3, 18, 44, 45])
    def test_points_on_circle(self, count):
        points = polygon_points(50.0, count, 10.0, -20.0)
        assert len(points) == count
        for x, y in points:
            assert math.hypot(x - 10.0, y + 20.0) == pytest.approx(50.0)

    @pytest.mark.parametrize("count", [3, 7, 44])
    def test_even_spacing(self, count):
        points = polygon_points(1.0, count)
        step = 2 * math.pi / count
        for i in range(1, count):
            a0 = math.atan2(points[i - 1][1], points[i - 1][0])
            a1 = math.atan2(points[i][1], points[i][0])
            assert (a1 - a0) % (2 * math.pi) == pytest.approx(step)

    def test_starts_at_angle_zero(self):
        assert polygon_points(2.0, 6, 1.0, 1.0)[0] == pytest.approx((3.0, 1.0))


class TestTangentLine:
    """Tests for tangent_line."""

    @pytest.fixture
    def circles(self):
        slave = PitchCircle((1232.0, 664.0), pitch_radius(18, 12.7))
        master = PitchCircle((802.0, 745.0), pitch_radius(44, 12.7))
        return slave, master

    @pytest.mark.parametrize("flip", [False, True])
    def test_endpoints_on_circles(self, circles, flip):
        a, b = circles
        line = tangent_line(a, b, flip)
        assert math.hypot(line.start[0] - a.x, line.start[1] - a.y) == pytest.approx(a.radius)
        assert math.hypot(line.end[0] - b.x, line.end[1] - b.y) == pytest.approx(b.radius)

    @pytest.mark.parametrize("flip", [False, True])
    def test_line_is_tangent(self, circles, flip):
        a, b = circles
        line = tangent_line(a, b, flip)
        direction = (line.end[0] - line.start[0], line.end[1] - line.start[1])
        for point, circle in ((line.start, a), (line.end, b)):
            radius = (point[0] - circle.x, point[1] - circle.y)
            dot = direction[0] * radius[0] + direction[1] * radius[1]
            assert dot == pytest.approx(0, abs=1e-6)

    def test_both_sides_same_length(self, circles):
        a, b = circles
        l = math.hypot(a.x - b.x, a.y - b.y)
        rd = a.radius - b.radius
        expected = math.sqrt(l ** 2 - rd ** 2)
        upper = tangent_line(a, b, True)
        lower = tangent_line(a, b, False)
        assert upper.length == pytest.approx(expected)
        assert lower.length == pytest.approx(expected)
        assert upper.start != pytest.approx(lower.start)

    def test_flip_sides(self, circles):
        # y grows downwards on screen; the flipped tangent runs over the top
        a, b = circles
        assert tangent_line(a, b, True).end[1] < b.y
        assert tangent_line(a, b, False).end[1] > b.y

    def test_equal_radii(self):
        a = PitchCircle((0.0, 0.0), 5.0)
        b = PitchCircle((100.0, 0.0), 5.0)
        line = tangent_line(a, b)
        assert line.length == pytest.approx(100.0)
        assert line.start[1] == pytest.approx(line.end[1])

    def test_enclosed_circle(self):
        a = PitchCircle((0.0, 0.0), 50.0)
        b = PitchCircle((10.0, 0.0), 5.0)
        with pytest.raises(ConfigurationError, match="no common tangent"):
            tangent_line(a, b)

    def test_concentric(self):
        a = PitchCircle((0.0, 0.0), 5.0)
        with pytest.raises(ConfigurationError):
            tangent_line(a, a)
