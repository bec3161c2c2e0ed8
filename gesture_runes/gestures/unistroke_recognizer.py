"""
Unistroke Recognizer

Matches a single finished stroke against named reference strokes. Both
sides go through the same normalization (resample, uniform scale,
centering), then each template is compared with a Golden Section Search
over a small rotation window. The closest template wins and its distance
is converted into a similarity score.

Reference: https://depts.washington.edu/acelab/proj/dollar/index.html
"""

import math
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from ..utils.gesture_utils import Point, PathUtils, PathLike
from .errors import EmptyPatternStoreError
from .normalization import normalize
from .rotation import distance_at_best_angle

logger = logging.getLogger(__name__)


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


@dataclass(frozen=True)
class RecognizerConfig:
    """Engine parameters. Angles are in radians."""
    angle_range: float = degrees_to_radians(10.0)
    angle_precision: float = degrees_to_radians(2.0)
    width: float = 100.0
    height: float = 100.0
    resample_num_points: int = 64

    @classmethod
    def from_degrees(cls, angle_range: float, angle_precision: float,
                     width: float, height: float,
                     resample_num_points: int) -> 'RecognizerConfig':
        """Build a config from angles given in degrees."""
        return cls(
            angle_range=degrees_to_radians(angle_range),
            angle_precision=degrees_to_radians(angle_precision),
            width=width,
            height=height,
            resample_num_points=resample_num_points,
        )

    @property
    def half_diagonal(self) -> float:
        return 0.5 * math.hypot(self.width, self.height)


@dataclass(frozen=True)
class Pattern:
    """A named template whose points are already normalized."""
    name: str
    points: Tuple[Point, ...]


@dataclass(frozen=True)
class RecognitionResult:
    """Best matching pattern with its similarity and raw distance."""
    pattern: Pattern
    similarity: float
    distance: float

    @property
    def name(self) -> str:
        return self.pattern.name

    def __iter__(self) -> Iterator:
        # Allows `pattern, similarity = recognizer.recognize(path)`
        return iter((self.pattern, self.similarity))


class UnistrokeRecognizer:
    """Holds the pattern store and scores strokes against it.

    The store is append-only. Callers sharing one recognizer between
    threads must serialize add_pattern and recognize themselves.
    """

    def __init__(self, config: Optional[RecognizerConfig] = None,
                 patterns: Iterable[Tuple[str, PathLike]] = ()):
        self.config = config or RecognizerConfig()
        self.patterns: List[Pattern] = []
        for name, path in patterns:
            self.add_pattern(name, path)

    def __len__(self) -> int:
        return len(self.patterns)

    def normalize_path(self, path: PathLike) -> List[Point]:
        """Run a raw path through the normalization pipeline."""
        return normalize(
            PathUtils.to_points(path),
            self.config.resample_num_points,
            self.config.width,
            self.config.height,
        )

    def add_pattern(self, name: str, path: PathLike) -> Pattern:
        """Normalize path and append it to the store under name."""
        pattern = Pattern(name, tuple(self.normalize_path(path)))
        self.patterns.append(pattern)
        logger.debug("Added pattern '%s' (%d stored)", name, len(self.patterns))
        return pattern

    def score_patterns(self, path: PathLike) -> List[Tuple[Pattern, float]]:
        """Best rotation distance to every stored pattern, in store order."""
        points = self.normalize_path(path)

        scores = []
        for pattern in self.patterns:
            distance = distance_at_best_angle(
                points,
                list(pattern.points),
                self.config.angle_range,
                self.config.angle_precision,
            )
            logger.debug("Pattern %s: distance %.4f", pattern.name, distance)
            scores.append((pattern, distance))
        return scores

    def distance_to_similarity(self, distance: float) -> float:
        """Convert distance to a similarity score (1.0 is a perfect match).

        The score is not clamped and goes negative for strokes further
        away than half the reference diagonal.
        """
        return 1.0 - distance / self.config.half_diagonal

    def recognize(self, path: PathLike) -> RecognitionResult:
        """Return the closest stored pattern; ties go to the earliest one."""
        if not self.patterns:
            raise EmptyPatternStoreError()
        return self.best_match(self.score_patterns(path))

    def best_match(self, scores: List[Tuple[Pattern, float]]) -> RecognitionResult:
        """Pick the smallest distance from score_patterns output.

        Scores are scanned in order with a strict comparison, so the
        earliest pattern wins a tie.
        """
        if not scores:
            raise EmptyPatternStoreError()

        best_pattern = None
        best_distance = math.inf
        for pattern, distance in scores:
            if best_pattern is None or distance < best_distance:
                best_pattern = pattern
                best_distance = distance

        similarity = self.distance_to_similarity(best_distance)
        logger.debug("Best pattern: %s with distance %.4f",
                     best_pattern.name, best_distance)
        return RecognitionResult(best_pattern, similarity, best_distance)
