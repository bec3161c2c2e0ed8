"""
Rotation search between a candidate stroke and a template.

The candidate is rotated about its own centroid and compared point by
point with the template. Golden Section Search finds the angle inside a
symmetric window that minimizes the mean distance. The distance is
assumed unimodal over the window, which holds for the small windows the
recognizer is configured with.
"""

import math
from typing import List

from ..utils.gesture_utils import Point, GeometryUtils

# Golden ratio conjugate (~0.618)
PHI = 0.5 * (-1.0 + math.sqrt(5.0))


def path_distance(points1: List[Point], points2: List[Point]) -> float:
    """Mean Euclidean distance between corresponding points."""
    if len(points1) != len(points2):
        raise ValueError(
            f"paths differ in length: {len(points1)} != {len(points2)}"
        )
    if not points1:
        raise ValueError("cannot compare empty paths")

    distance = 0.0
    for p1, p2 in zip(points1, points2):
        distance += GeometryUtils.calculate_distance(p1, p2)

    return distance / len(points1)


def distance_at_angle(points: List[Point], template_points: List[Point],
                      angle: float) -> float:
    """Distance to the template after rotating points by angle radians."""
    rotated_points = GeometryUtils.rotate_points(points, angle)
    return path_distance(rotated_points, template_points)


def distance_at_best_angle(points: List[Point], template_points: List[Point],
                           angle_range: float, threshold: float) -> float:
    """Find the smallest distance for an angle in [-angle_range, angle_range].

    The search interval is narrowed until its width is at most threshold
    radians.
    """
    if threshold <= 0:
        raise ValueError(f"threshold must be positive, got {threshold}")

    theta_a = -angle_range
    theta_b = angle_range

    x1 = PHI * theta_a + (1 - PHI) * theta_b
    f1 = distance_at_angle(points, template_points, x1)

    x2 = (1 - PHI) * theta_a + PHI * theta_b
    f2 = distance_at_angle(points, template_points, x2)

    while abs(theta_b - theta_a) > threshold:
        if f1 < f2:
            theta_b = x2
            x2 = x1
            f2 = f1
            x1 = PHI * theta_a + (1 - PHI) * theta_b
            f1 = distance_at_angle(points, template_points, x1)
        else:
            theta_a = x1
            x1 = x2
            f1 = f2
            x2 = (1 - PHI) * theta_a + PHI * theta_b
            f2 = distance_at_angle(points, template_points, x2)

    return min(f1, f2)
