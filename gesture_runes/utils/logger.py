"""
Logging utilities for recognition and recording events.
"""

import datetime
import logging
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


class RuneLogger:
    """Reports recognition events to the user and an optional debug file."""

    def __init__(self, debug_file: Optional[str] = None):
        self.debug_file = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'a', encoding='utf-8')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning("Could not open debug file %s: %s", debug_file, e)

    def _timestamp(self) -> str:
        return datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]

    def _emit(self, message: str):
        timestamp = self._timestamp()
        print(f"[{timestamp}] {message}")

        if self.debug_file:
            try:
                self.debug_file.write(f"[{timestamp}] {message}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning("Could not write debug file: %s", e)

    def log_recognition(self, name: str, similarity: float, threshold: float):
        """Log the best match and whether it clears the threshold."""
        if similarity > threshold:
            self._emit(f"✅ recognized as {name} ({similarity:.3f})")
        else:
            self._emit(f"🤔 recognized as {name} ({similarity:.3f}), "
                       f"below threshold {threshold:.2f}")

    def log_scores(self, scores: List[Tuple[str, float]]):
        """Log the distance to every pattern."""
        for name, distance in scores:
            self._emit(f"   Pattern {name}: distance {distance:.4f}")

    def log_command(self, name: str, command: str):
        self._emit(f"🚀 running command for {name}: {command}")

    def log_missing_command(self, name: str):
        self._emit(f"⚠️ no command bound to {name}")

    def log_recorded(self, name: str, point_count: int, path: str):
        self._emit(f"💾 recorded {name}: {point_count} points -> {path}")

    def log_cancelled(self):
        self._emit("👋 cancelled")

    def log_error(self, message: str):
        self._emit(f"❌ {message}")

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
