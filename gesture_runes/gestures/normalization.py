"""
Stroke normalization pipeline.

A raw stroke is resampled to a fixed number of points spaced evenly along
its arc length, scaled uniformly so its bounding box fits the reference
frame, and translated so its centroid sits at the origin. Rotation is not
normalized here; it is searched for at match time.
"""

import math
import logging
from typing import List

from ..utils.gesture_utils import Point, GeometryUtils
from .errors import DegenerateInputError, ResampleError

logger = logging.getLogger(__name__)

# Extents at or below this are treated as zero when scaling.
MIN_EXTENT = 1e-10


def resample(points: List[Point], num_points: int) -> List[Point]:
    """Resample points to num_points equally spaced along the path."""
    if num_points < 2:
        raise ValueError(f"num_points must be at least 2, got {num_points}")
    if not points:
        return []

    total_length = GeometryUtils.calculate_path_length(points)
    if total_length == 0:
        return [points[0]] * num_points

    interval = total_length / (num_points - 1)
    distance_acc = 0.0
    resampled = [points[0]]

    for prev_point, curr_point in zip(points, points[1:]):
        d = GeometryUtils.calculate_distance(prev_point, curr_point)
        if d == 0:
            continue

        # Offset along this segment of the next tick
        offset = interval - distance_acc
        while offset <= d and len(resampled) < num_points:
            ratio = offset / d
            resampled.append(Point(
                prev_point.x + ratio * (curr_point.x - prev_point.x),
                prev_point.y + ratio * (curr_point.y - prev_point.y),
            ))
            offset += interval
        distance_acc = d - (offset - interval)

    # The last tick can fall a rounding error past the end of the path
    if len(resampled) == num_points - 1:
        resampled.append(points[-1])

    if len(resampled) != num_points:
        raise ResampleError(
            f"path resampled to {len(resampled)} points, expected {num_points}"
        )

    return resampled


def scale_to(points: List[Point], width: float, height: float) -> List[Point]:
    """Scale points uniformly so the bounding box fits width x height."""
    box = GeometryUtils.calculate_bounding_box(points)
    if box.width <= MIN_EXTENT or box.height <= MIN_EXTENT:
        raise DegenerateInputError(
            f"stroke has no extent to scale ({box.width:g} x {box.height:g})"
        )

    scale = min(width / box.width, height / box.height)
    if not math.isfinite(scale):
        raise DegenerateInputError(f"stroke scale factor is not finite: {scale}")

    return [Point(p.x * scale, p.y * scale) for p in points]


def translate_to_origin(points: List[Point]) -> List[Point]:
    """Translate points so their centroid is at the origin."""
    centroid = GeometryUtils.calculate_centroid(points)
    return [Point(p.x - centroid.x, p.y - centroid.y) for p in points]


def normalize(points: List[Point], num_points: int,
              width: float, height: float) -> List[Point]:
    """Resample, scale, then center a raw stroke."""
    if len(points) < 2:
        raise DegenerateInputError(f"too few points: {len(points)}")

    resampled = resample(points, num_points)
    scaled = scale_to(resampled, width, height)
    normalized = translate_to_origin(scaled)
    logger.debug("Normalized %d points into %d", len(points), len(normalized))
    return normalized
