"""
Utilities package for stroke geometry and reporting.

This package provides the geometry primitives shared by the recognizer
and the user-facing event logger.
"""

from .gesture_utils import (
    Point,
    BoundingBox,
    GeometryUtils,
    PathUtils
)
from .logger import RuneLogger

__all__ = [
    'Point',
    'BoundingBox',
    'GeometryUtils',
    'PathUtils',
    'RuneLogger'
]
