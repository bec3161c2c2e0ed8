"""
Errors raised by the stroke recognition engine.
"""


class RecognitionError(Exception):
    """Base class for recognition failures the caller is expected to report."""


class DegenerateInputError(RecognitionError):
    """The path has too few points or no extent along one axis."""


class EmptyPatternStoreError(RecognitionError):
    """Recognition was requested without any stored pattern."""

    def __init__(self, message: str = "no patterns available"):
        super().__init__(message)


class ResampleError(RuntimeError):
    """Resampling did not produce the requested number of points.

    This indicates a defect in the resampler and is never reported as a
    user-facing condition.
    """
