"""
Gesture Runes Package
Draw a single stroke and run the command bound to the closest recorded one.
"""

from .gestures.unistroke_recognizer import (
    Pattern,
    RecognitionResult,
    RecognizerConfig,
    UnistrokeRecognizer
)
from .utils.gesture_utils import Point

__version__ = "1.0.0"
__all__ = ["Pattern", "Point", "RecognitionResult", "RecognizerConfig", "UnistrokeRecognizer"]
