"""
Configuration loading and validation.
"""

from .settings import AppConfig, ConfigError, GestureCommand, RecognizerSettings, load_config

__all__ = ['AppConfig', 'ConfigError', 'GestureCommand', 'RecognizerSettings', 'load_config']
