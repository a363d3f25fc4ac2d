"""
Tests for smoothpath.curve.geometry
"""

import numpy
import pytest

from smoothpath.curve import geometry
from smoothpath.errors import InvalidInputError


class TestAsPoints:
    """Point validation"""

    def test_converts_to_float_array(self):
        points = geometry.as_points([(1, 2), (3, 4)])
        assert points.dtype == float
        numpy.testing.assert_array_equal(points, [[1, 2], [3, 4]])

    def test_returns_copy(self):
        original = numpy.array([[1., 2.], [3., 4.]])
        points = geometry.as_points(original)
        points[0, 0] = 10
        assert original[0, 0] == 1

    @pytest.mark.parametrize('points', [
        [1, 2, 3],
        [(1, 2, 3), (4, 5, 6)],
        [[(1, 2)], [(3, 4)]],
        [('a', 'b')],
        [(1, 2), (3,)],
    ])
    def test_bad_shape_or_type(self, points):
        with pytest.raises(InvalidInputError):
            geometry.as_points(points)

    def test_min_points(self):
        geometry.as_points([(0, 0), (1, 1)], min_points=2)
        with pytest.raises(InvalidInputError):
            geometry.as_points([(0, 0)], min_points=2)

    def test_non_finite(self):
        with pytest.raises(InvalidInputError):
            geometry.as_points([(0, 0), (numpy.nan, 1)])

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            geometry.as_points([])


class TestPolylineGeometry:
    """Polyline measurement"""

    def test_lerp(self):
        numpy.testing.assert_allclose(geometry.lerp((0, 0), (4, 8), [0, 0.25, 1]), [(0, 0), (1, 2), (4, 8)])

    def test_lerp_endpoint_exact(self):
        numpy.testing.assert_array_equal(geometry.lerp((0.1, 0.7), (0.3, 0.2), 1.0), [0.3, 0.2])

    def test_polyline_length(self):
        assert geometry.polyline_length([(0, 0), (3, 4), (3, 10)]) == pytest.approx(11)

    def test_cumulative_distances(self):
        points = [(0, 0), (3, 4), (3, 10)]
        numpy.testing.assert_allclose(geometry.cumulative_distances(points, unit=False), [0, 5, 11])
        numpy.testing.assert_allclose(geometry.cumulative_distances(points), [0, 5/11, 1])

    def test_cumulative_distances_zero_length(self):
        with pytest.raises(InvalidInputError):
            geometry.cumulative_distances([(1, 1), (1, 1)])

    def test_duplicate_point_indices(self):
        points = [(0, 0), (0, 0), (1, 1), (2, 2), (2, 2)]
        numpy.testing.assert_array_equal(geometry.duplicate_point_indices(points), [0, 3])

    def test_filter_dup_points(self):
        points = [(0, 0), (0, 0), (1, 1), (1, 1 + 1e-12), (2, 2)]
        numpy.testing.assert_array_equal(geometry.filter_dup_points(points), [(0, 0), (1, 1), (2, 2)])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
