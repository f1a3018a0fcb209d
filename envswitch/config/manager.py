"""Settings management for envswitch."""

import logging
import os
from typing import Any, Dict, Optional

import yaml

from envswitch.utils.errors import ConfigurationError, create_error_suggestions, format_validation_errors

from .schemas import DEFAULT_SETTINGS
from .validator import SettingsValidator

SETTINGS_FILE = os.path.join(".vscode", "envswitch.yml")

logger = logging.getLogger(__name__)


class SettingsManager:
    """Loads the optional per-project settings file."""

    def __init__(self, project_root: Optional[str] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Project folder (settings are skipped when None)
        """
        self.project_root = project_root
        self.validator = SettingsValidator()
        self._settings_cache = None

    def get_settings_path(self) -> Optional[str]:
        """Get path to the settings file, whether or not it exists."""
        if not self.project_root:
            return None
        return os.path.join(self.project_root, SETTINGS_FILE)

    def load_settings(self) -> Dict[str, Any]:
        """
        Load settings for the project, falling back to defaults.

        Returns:
            Dict[str, Any]: Settings with every default section filled in

        Raises:
            ConfigurationError: If the file is not valid YAML or fails validation
        """
        if self._settings_cache is not None:
            return self._settings_cache

        settings_path = self.get_settings_path()
        if not settings_path or not os.path.isfile(settings_path):
            logger.debug("No settings file, using defaults")
            self._settings_cache = self.validator.merge_defaults({}, DEFAULT_SETTINGS)
            return self._settings_cache

        try:
            with open(settings_path, encoding="utf-8") as f:
                settings = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in {settings_path}",
                details=str(e),
                suggestions=create_error_suggestions("settings_invalid"),
            )
        except OSError as e:
            raise ConfigurationError(f"Cannot read {settings_path}: {e}")

        if settings is None:
            settings = {}

        errors = self.validator.validate_settings(settings)
        if errors:
            raise ConfigurationError(
                f"Invalid settings in {settings_path}",
                details=format_validation_errors(errors),
                suggestions=create_error_suggestions("settings_invalid"),
            )

        logger.debug("Loaded settings from %s", settings_path)
        self._settings_cache = self.validator.merge_defaults(settings, DEFAULT_SETTINGS)
        return self._settings_cache
