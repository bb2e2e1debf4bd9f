import math

import numpy as np
import pytest

from trampolinedig.model.polygon import RegularPolygon, half_angle_tangent


class TestRegularPolygon:
    """Tests for the regular polygon primitive."""

    def test_square_apothem_from_side_length(self):
        square = RegularPolygon.from_side_length(4, 2.0)
        assert square.apothem == pytest.approx(1.0)

    def test_square_area(self):
        square = RegularPolygon(sides=4, apothem=1.0)
        assert square.side_length == pytest.approx(2.0)
        assert square.perimeter == pytest.approx(8.0)
        assert square.area == pytest.approx(4.0)

    def test_hexagon_area(self):
        hexagon = RegularPolygon.from_side_length(6, 1.0)
        assert hexagon.area == pytest.approx(3 * math.sqrt(3) / 2)

    def test_side_length_round_trip(self):
        octagon = RegularPolygon.from_side_length(8, 74.0)
        assert octagon.side_length == pytest.approx(74.0)
        assert octagon.apothem == pytest.approx(37.0 * (math.sqrt(2) + 1))

    def test_offset_keeps_side_count(self):
        octagon = RegularPolygon(sides=8, apothem=10.0)
        grown = octagon.offset(2.5)
        assert grown.sides == 8
        assert grown.apothem == pytest.approx(12.5)
        assert grown.area > octagon.area

    def test_many_sides_approach_circle(self):
        polygon = RegularPolygon(sides=100_000, apothem=1.0)
        assert polygon.area == pytest.approx(math.pi, rel=1e-6)

    def test_arrays_broadcast(self):
        polygons = RegularPolygon(sides=np.array([3, 4, 6]), apothem=1.0)
        expected = [3 * math.sqrt(3), 4.0, 2 * math.sqrt(3)]
        np.testing.assert_allclose(polygons.area, expected)

    def test_half_angle_tangent(self):
        assert half_angle_tangent(4) == pytest.approx(1.0)
        assert half_angle_tangent(8) == pytest.approx(math.sqrt(2) - 1)
