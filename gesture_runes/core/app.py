"""
Application flows: recognize a stroke and run its command, or record a
new reference stroke.
"""

import logging
from typing import Callable, Dict, List, Optional

from ..config.settings import AppConfig
from ..gestures.errors import RecognitionError, EmptyPatternStoreError
from ..gestures.unistroke_recognizer import UnistrokeRecognizer
from ..storage.gesture_files import GestureFileError, gesture_file_path, load_gestures, save_gesture
from ..utils.gesture_utils import PathUtils
from ..utils.logger import RuneLogger
from .actions import run_command
from .errors import CaptureError, TooFewPointsError

logger = logging.getLogger(__name__)


class RuneApp:
    """Coordinates capture, recognition, persistence and command execution.

    capture is any object with a capture() method returning a list of
    {'x', 'y', 't'} dicts, or None when the user cancelled.
    """

    def __init__(self, config: AppConfig, capture, data_dir: Optional[str] = None,
                 rune_logger: Optional[RuneLogger] = None,
                 command_runner: Callable[[str], object] = run_command,
                 show_scores: bool = False):
        self.config = config
        self.capture = capture
        self.data_dir = data_dir
        self.logger = rune_logger or RuneLogger()
        self.command_runner = command_runner
        self.show_scores = show_scores

    def _capture_path(self) -> Optional[List[Dict[str, float]]]:
        """Capture a stroke; None if cancelled. Short strokes raise TooFewPointsError."""
        path = self.capture.capture()
        if path is None:
            self.logger.log_cancelled()
            return None

        if len(path) < self.config.recognizer.point_count_threshold:
            self.logger.log_error(
                f"too few points ({len(path)} < {self.config.recognizer.point_count_threshold})")
            raise TooFewPointsError(len(path))
        return path

    def build_recognizer(self) -> UnistrokeRecognizer:
        """Load the templates of every pattern bound to a command."""
        gestures = load_gestures(self.config.pattern_names(), self.data_dir)
        logger.info("Matching against %d pattern(s)", len(gestures))
        return UnistrokeRecognizer(
            self.config.recognizer.to_recognizer_config(),
            gestures,
        )

    def recognize(self) -> int:
        """Run the recognize flow. Returns a process exit status."""
        try:
            path = self._capture_path()
            if path is None:
                return 0

            recognizer = self.build_recognizer()
            if not recognizer.patterns:
                raise EmptyPatternStoreError("no patterns configured")

            scores = recognizer.score_patterns(path)
            if self.show_scores:
                self.logger.log_scores([(p.name, d) for p, d in scores])

            result = recognizer.best_match(scores)
        except TooFewPointsError:
            return 1
        except (CaptureError, RecognitionError, GestureFileError) as e:
            self.logger.log_error(str(e))
            return 1

        threshold = self.config.recognizer.command_execute_threshold
        self.logger.log_recognition(result.name, result.similarity, threshold)
        if result.similarity <= threshold:
            return 0

        command = self.config.find_command(result.name)
        if command is None:
            self.logger.log_missing_command(result.name)
            return 1

        self.logger.log_command(result.name, command.command)
        self.command_runner(command.command)
        return 0

    def record(self, name: str) -> int:
        """Run the record flow. Returns a process exit status."""
        try:
            gesture_file_path(name, self.data_dir)
            path = self._capture_path()
            if path is None:
                return 0
            # A stroke that cannot be normalized would never match
            UnistrokeRecognizer(self.config.recognizer.to_recognizer_config()).normalize_path(path)
            points = PathUtils.convert_dict_to_points(path)
            file_path = save_gesture(name, points, self.data_dir)
        except TooFewPointsError:
            return 1
        except (CaptureError, RecognitionError, GestureFileError) as e:
            self.logger.log_error(str(e))
            return 1

        self.logger.log_recorded(name, len(points), file_path)
        return 0
