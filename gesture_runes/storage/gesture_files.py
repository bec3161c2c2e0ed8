"""
Gesture template files.

Each recorded stroke is stored in its own file named after the pattern,
one point per line as two whitespace separated numbers `x y`, in drawing
order. Raw captured points are stored; normalization happens at load.
"""

import os
import logging
from typing import Iterable, List, Optional, Tuple

from ..config.settings import APP_NAME
from ..utils.gesture_utils import Point

logger = logging.getLogger(__name__)


class GestureFileError(Exception):
    """Raised when a gesture file cannot be read or written."""


def gesture_data_dir() -> str:
    data_home = os.environ.get('XDG_DATA_HOME') or os.path.join(
        os.path.expanduser('~'), '.local', 'share')
    return os.path.join(data_home, APP_NAME)


def gesture_file_path(name: str, data_dir: Optional[str] = None) -> str:
    """Path of the file holding pattern name."""
    if not name or name in ('.', '..') or os.sep in name or (os.altsep and os.altsep in name):
        raise GestureFileError(f"invalid gesture name: {name!r}")
    return os.path.join(data_dir or gesture_data_dir(), name)


def parse_gesture(lines: Iterable[str], source: str = '<string>') -> List[Point]:
    """Parse `x y` lines into points. Blank lines are ignored."""
    points = []
    for line_no, line in enumerate(lines, 1):
        items = line.split()
        if not items:
            continue
        if len(items) != 2:
            raise GestureFileError(
                f"{source}:{line_no}: expected 'x y', got {line.strip()!r}")
        try:
            points.append(Point(float(items[0]), float(items[1])))
        except ValueError as e:
            raise GestureFileError(f"{source}:{line_no}: {e}") from e
    return points


def format_gesture(points: Iterable[Point]) -> str:
    return '\n'.join(f"{p.x!r} {p.y!r}" for p in points)


def load_gesture(path: str) -> List[Point]:
    """Read a single gesture file."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return parse_gesture(f, source=path)
    except OSError as e:
        raise GestureFileError(f"couldn't read gesture file {path}, {e}") from e


def load_gestures(names: Iterable[str],
                  data_dir: Optional[str] = None) -> List[Tuple[str, List[Point]]]:
    """Load the gestures that exist among names, keeping their order."""
    gestures = []
    for name in names:
        path = gesture_file_path(name, data_dir)
        if not os.path.isfile(path):
            logger.warning("Gesture file for pattern '%s' not found at %s", name, path)
            continue
        gestures.append((name, load_gesture(path)))

    logger.info("Loaded %d gesture(s) from %s", len(gestures), data_dir or gesture_data_dir())
    return gestures


def save_gesture(name: str, points: Iterable[Point],
                 data_dir: Optional[str] = None) -> str:
    """Write a gesture file, replacing any previous recording. Returns its path."""
    path = gesture_file_path(name, data_dir)
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(format_gesture(points))
            f.flush()
            os.fsync(f.fileno())
    except OSError as e:
        raise GestureFileError(f"couldn't write gesture to {path}: {e}") from e
    return path
