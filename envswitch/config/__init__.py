"""Configuration management for envswitch."""

from .manager import SETTINGS_FILE, SettingsManager
from .schemas import DEFAULT_SETTINGS, SETTINGS_SCHEMA

__all__ = ['SettingsManager', 'SETTINGS_FILE', 'SETTINGS_SCHEMA', 'DEFAULT_SETTINGS']
