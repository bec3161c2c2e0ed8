"""Shared pytest fixtures for the gesture_runes test suite.

Fixtures:
    up_stroke: Caret shaped stroke (^) in screen coordinates
    down_stroke: V shaped stroke
    recognizer_config: Engine config with a 10 degree window and 2 degree tolerance
    data_dir: Temporary gesture data directory
"""

import math
import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from gesture_runes.gestures.unistroke_recognizer import RecognizerConfig
from gesture_runes.utils.gesture_utils import Point, GeometryUtils


def polyline(*vertices, steps=10):
    """Densely sampled polyline through vertices, like a captured stroke."""
    points = [Point(*vertices[0])]
    for (x0, y0), (x1, y1) in zip(vertices, vertices[1:]):
        for i in range(1, steps + 1):
            t = i / steps
            points.append(Point(x0 + t * (x1 - x0), y0 + t * (y1 - y0)))
    return points


def rotated(points, degrees):
    return GeometryUtils.rotate_points(points, math.radians(degrees))


def as_capture(points):
    """Convert points to the {'x', 'y', 't'} dicts capture backends produce."""
    return [{'x': p.x, 'y': p.y, 't': float(i)} for i, p in enumerate(points)]


@pytest.fixture
def up_stroke():
    return polyline((0, 100), (50, 0), (100, 100))


@pytest.fixture
def down_stroke():
    return polyline((0, 0), (50, 100), (100, 0))


@pytest.fixture
def recognizer_config():
    return RecognizerConfig.from_degrees(
        angle_range=10.0,
        angle_precision=2.0,
        width=100.0,
        height=100.0,
        resample_num_points=64,
    )


@pytest.fixture
def data_dir(tmp_path):
    path = tmp_path / 'gestures'
    path.mkdir()
    return str(path)
