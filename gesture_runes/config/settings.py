"""
Configuration settings for gesture runes.

Settings are read from a JSON file; every key is optional and falls back
to the defaults below.
"""

import json
import math
import os
import logging
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional

from ..gestures.unistroke_recognizer import RecognizerConfig

logger = logging.getLogger(__name__)

APP_NAME = 'gesture-runes'
CONFIG_FILE_NAME = 'config.json'


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or is invalid."""


@dataclass
class RecognizerSettings:
    """Recognition settings as written in the config file."""
    # Similarity required to run the bound command, in [0, 1]
    command_execute_threshold: float = 0.8
    # Strokes with fewer captured points are rejected
    point_count_threshold: int = 10
    # Rotation search half-window (degrees)
    rotation_angle_range: float = 10.0
    # Rotation search tolerance (degrees)
    rotation_angle_threshold: float = 2.0
    resample_num_points: int = 64
    # Reference frame, unrelated to the screen size
    width: float = 100.0
    height: float = 100.0

    def validate(self):
        for f in fields(self):
            if not math.isfinite(getattr(self, f.name)):
                raise ConfigError(f"recognizer.{f.name} should be a finite number")
        if not 0.0 <= self.command_execute_threshold <= 1.0:
            raise ConfigError("recognizer.command_execute_threshold should be in range [0,1]")
        if self.point_count_threshold < 0:
            raise ConfigError("recognizer.point_count_threshold should not be negative")
        if self.rotation_angle_range <= 0:
            raise ConfigError("recognizer.rotation_angle_range should be positive number")
        if self.rotation_angle_threshold <= 0:
            raise ConfigError("recognizer.rotation_angle_threshold should be positive number")
        if self.resample_num_points < 2:
            raise ConfigError("recognizer.resample_num_points should be at least 2")
        if self.width <= 0:
            raise ConfigError("recognizer.width should be positive number")
        if self.height <= 0:
            raise ConfigError("recognizer.height should be positive number")

    def to_recognizer_config(self) -> RecognizerConfig:
        return RecognizerConfig.from_degrees(
            angle_range=self.rotation_angle_range,
            angle_precision=self.rotation_angle_threshold,
            width=self.width,
            height=self.height,
            resample_num_points=self.resample_num_points,
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RecognizerSettings':
        if not isinstance(data, dict):
            raise ConfigError("recognizer section should be an object")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"unknown recognizer settings: {', '.join(unknown)}")

        values = {}
        for key, value in data.items():
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"recognizer.{key} should be a number")
            if not math.isfinite(value):
                raise ConfigError(f"recognizer.{key} should be a finite number")
            if key in ('point_count_threshold', 'resample_num_points'):
                if int(value) != value:
                    raise ConfigError(f"recognizer.{key} should be an integer")
                value = int(value)
            else:
                value = float(value)
            values[key] = value

        return cls(**values)


@dataclass
class GestureCommand:
    """A shell command bound to a pattern name."""
    pattern: str
    command: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any], index: int) -> 'GestureCommand':
        if not isinstance(data, dict):
            raise ConfigError(f"commands[{index}] should be an object")
        pattern = data.get('pattern')
        command = data.get('command')
        if not isinstance(pattern, str) or not pattern.strip():
            raise ConfigError(f"commands[{index}].pattern should be a non-empty string")
        if not isinstance(command, str) or not command.strip():
            raise ConfigError(f"commands[{index}].command should be a non-empty string")
        return cls(pattern.strip(), command)


@dataclass
class AppConfig:
    """Top level configuration: recognizer settings and bound commands."""
    recognizer: RecognizerSettings = field(default_factory=RecognizerSettings)
    commands: List[GestureCommand] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AppConfig':
        if not isinstance(data, dict):
            raise ConfigError("configuration root should be an object")

        recognizer = RecognizerSettings.from_dict(data.get('recognizer', {}))
        recognizer.validate()

        commands_data = data.get('commands', [])
        if not isinstance(commands_data, list):
            raise ConfigError("commands should be a list")
        commands = [GestureCommand.from_dict(item, i)
                    for i, item in enumerate(commands_data)]

        return cls(recognizer=recognizer, commands=commands)

    @classmethod
    def load(cls, config_path: str) -> 'AppConfig':
        """Load and validate a configuration file."""
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except OSError as e:
            raise ConfigError(f"failed to open config {config_path}, {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"failed to parse config {config_path}, {e}") from e

        try:
            return cls.from_dict(data)
        except ConfigError as e:
            raise ConfigError(f"{config_path}: {e}") from e

    def pattern_names(self) -> List[str]:
        """Distinct pattern names in the order commands list them."""
        names = []
        for command in self.commands:
            if command.pattern not in names:
                names.append(command.pattern)
        return names

    def find_command(self, pattern_name: str) -> Optional[GestureCommand]:
        for command in self.commands:
            if command.pattern == pattern_name:
                return command
        return None


def default_config_path() -> str:
    config_home = os.environ.get('XDG_CONFIG_HOME') or os.path.join(
        os.path.expanduser('~'), '.config')
    return os.path.join(config_home, APP_NAME, CONFIG_FILE_NAME)


def load_config(config_path: Optional[str] = None) -> AppConfig:
    """Load an explicit config file, or the default one if it exists."""
    if config_path:
        return AppConfig.load(config_path)

    config_path = default_config_path()
    if os.path.exists(config_path):
        logger.info("Loading configuration file %s", config_path)
        return AppConfig.load(config_path)

    logger.info("Config %s not found, using default configuration", config_path)
    return AppConfig()
