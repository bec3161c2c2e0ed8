"""
Shared geometry utilities for stroke recognition.

Points are immutable values; a path is a plain list of them in drawing
order. Captured paths arrive as dicts with 'x', 'y' and 't' keys and are
converted here before they reach the recognizer.
"""

import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Union


@dataclass(frozen=True)
class Point:
    """Represents a 2D point."""
    x: float
    y: float

    def __repr__(self):
        return f"Point({self.x:.3f}, {self.y:.3f})"

    def distance_to(self, other: 'Point') -> float:
        """Calculate Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounding box of a path."""
    x: float
    y: float
    width: float
    height: float


class GeometryUtils:
    """Utility class for geometric calculations."""

    @staticmethod
    def calculate_distance(p1: Point, p2: Point) -> float:
        """Calculate Euclidean distance between two points."""
        return math.hypot(p1.x - p2.x, p1.y - p2.y)

    @staticmethod
    def calculate_path_length(points: List[Point]) -> float:
        """Calculate total path length."""
        if len(points) < 2:
            return 0.0

        length = 0.0
        for i in range(1, len(points)):
            length += GeometryUtils.calculate_distance(points[i-1], points[i])
        return length

    @staticmethod
    def calculate_centroid(points: List[Point]) -> Point:
        """Calculate the centroid of a list of points."""
        if not points:
            return Point(0.0, 0.0)
        sum_x = sum(p.x for p in points)
        sum_y = sum(p.y for p in points)
        return Point(sum_x / len(points), sum_y / len(points))

    @staticmethod
    def calculate_bounding_box(points: List[Point]) -> BoundingBox:
        """Get the axis-aligned bounding box of a path."""
        if not points:
            return BoundingBox(0.0, 0.0, 0.0, 0.0)

        min_x = min(p.x for p in points)
        max_x = max(p.x for p in points)
        min_y = min(p.y for p in points)
        max_y = max(p.y for p in points)

        return BoundingBox(min_x, min_y, max_x - min_x, max_y - min_y)

    @staticmethod
    def rotate_points(points: List[Point], angle: float) -> List[Point]:
        """Rotate points around their centroid by angle radians."""
        centroid = GeometryUtils.calculate_centroid(points)
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)

        rotated = []
        for point in points:
            dx = point.x - centroid.x
            dy = point.y - centroid.y

            new_x = dx * cos_a - dy * sin_a + centroid.x
            new_y = dx * sin_a + dy * cos_a + centroid.y

            rotated.append(Point(new_x, new_y))

        return rotated


PathLike = Iterable[Union[Point, Dict[str, float]]]


class PathUtils:
    """Utility class for path conversion."""

    @staticmethod
    def convert_dict_to_points(path: List[Dict[str, float]]) -> List[Point]:
        """Convert path from capture dict format to Point objects."""
        return [Point(float(p['x']), float(p['y'])) for p in path]

    @staticmethod
    def convert_points_to_dict(points: List[Point]) -> List[Dict[str, float]]:
        """Convert Point objects to dict format (without timestamps)."""
        return [{'x': p.x, 'y': p.y} for p in points]

    @staticmethod
    def to_points(path: PathLike) -> List[Point]:
        """Accept either Points or capture dicts and return a list of Points."""
        points = []
        for item in path:
            if isinstance(item, Point):
                points.append(item)
            else:
                points.append(Point(float(item['x']), float(item['y'])))
        return points
