"""
Stroke recognition engine.

This package normalizes finished strokes and matches them against named
reference strokes with a rotation search.
"""

from .errors import (
    RecognitionError,
    DegenerateInputError,
    EmptyPatternStoreError,
    ResampleError
)
from .unistroke_recognizer import (
    Pattern,
    RecognitionResult,
    RecognizerConfig,
    UnistrokeRecognizer,
    degrees_to_radians
)

__all__ = [
    'RecognitionError',
    'DegenerateInputError',
    'EmptyPatternStoreError',
    'ResampleError',
    'Pattern',
    'RecognitionResult',
    'RecognizerConfig',
    'UnistrokeRecognizer',
    'degrees_to_radians'
]
