"""
Errors of the application flows.
"""


class CaptureError(Exception):
    """Raised when no input source is available."""


class TooFewPointsError(Exception):
    """The captured stroke is shorter than the configured point count."""

    def __init__(self, point_count: int):
        super().__init__(f"too few points: {point_count}")
        self.point_count = point_count
