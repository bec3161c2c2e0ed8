"""
Persistence of recorded gesture templates.
"""

from .gesture_files import (
    GestureFileError,
    gesture_data_dir,
    load_gesture,
    load_gestures,
    save_gesture
)

__all__ = [
    'GestureFileError',
    'gesture_data_dir',
    'load_gesture',
    'load_gestures',
    'save_gesture'
]
