"""Unit tests for the geometry primitives in gesture_runes.utils.gesture_utils."""

import math

import pytest

from gesture_runes.utils.gesture_utils import BoundingBox, GeometryUtils, PathUtils, Point


class TestPoint:

    def test_distance_to(self):
        assert Point(0, 0).distance_to(Point(3, 4)) == 5.0

    def test_points_are_immutable(self):
        p = Point(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 3.0

    def test_equality_is_by_value(self):
        assert Point(1.0, 2.0) == Point(1.0, 2.0)


class TestGeometryUtils:

    def test_path_length(self):
        points = [Point(0, 0), Point(3, 4), Point(3, 10)]
        assert GeometryUtils.calculate_path_length(points) == 11.0

    def test_path_length_of_short_paths(self):
        assert GeometryUtils.calculate_path_length([]) == 0.0
        assert GeometryUtils.calculate_path_length([Point(5, 5)]) == 0.0

    def test_centroid(self):
        c = GeometryUtils.calculate_centroid([Point(0, 0), Point(4, 0), Point(2, 6)])
        assert c.x == pytest.approx(2.0)
        assert c.y == pytest.approx(2.0)

    def test_bounding_box(self):
        box = GeometryUtils.calculate_bounding_box([Point(-1, 2), Point(4, -3), Point(0, 0)])
        assert box == BoundingBox(-1, -3, 5, 5)

    def test_rotation_keeps_centroid(self):
        # Centroid (4/3, 4/3) has different x and y, so each axis must use its own center
        points = [Point(0, 0), Point(4, 0), Point(0, 4)]
        before = GeometryUtils.calculate_centroid(points)
        after = GeometryUtils.calculate_centroid(GeometryUtils.rotate_points(points, 0.7))
        assert after.x == pytest.approx(before.x)
        assert after.y == pytest.approx(before.y)

    def test_quarter_turn(self):
        points = [Point(1, 3), Point(3, 3)]
        rotated = GeometryUtils.rotate_points(points, math.pi / 2)
        assert rotated[0].x == pytest.approx(2.0)
        assert rotated[0].y == pytest.approx(2.0)
        assert rotated[1].x == pytest.approx(2.0)
        assert rotated[1].y == pytest.approx(4.0)

    def test_rotation_preserves_distances(self):
        points = [Point(0, 0), Point(10, 2), Point(7, 9)]
        rotated = GeometryUtils.rotate_points(points, 1.2)
        for i in range(len(points) - 1):
            assert rotated[i].distance_to(rotated[i + 1]) == pytest.approx(
                points[i].distance_to(points[i + 1]))


class TestPathUtils:

    def test_to_points_accepts_capture_dicts(self):
        path = [{'x': 1, 'y': 2, 't': 0.1}, {'x': 3.5, 'y': 4, 't': 0.2}]
        assert PathUtils.to_points(path) == [Point(1.0, 2.0), Point(3.5, 4.0)]

    def test_to_points_passes_points_through(self):
        points = [Point(1, 2), Point(3, 4)]
        assert PathUtils.to_points(points) == points

    def test_convert_points_to_dict(self):
        assert PathUtils.convert_points_to_dict([Point(1, 2)]) == [{'x': 1.0, 'y': 2.0}]
