"""Settings validation for envswitch."""

from typing import Any, Dict, List

import jsonschema

from .schemas import SETTINGS_SCHEMA


class SettingsValidator:
    """Validates envswitch settings files."""

    def validate_settings(self, settings: Any) -> List[str]:
        """
        Validate project settings.

        Args:
            settings: Parsed settings document

        Returns:
            List[str]: List of validation errors (empty if valid)
        """
        if not isinstance(settings, dict):
            return [f"Settings must be a mapping, got {type(settings).__name__}"]

        validator = jsonschema.Draft7Validator(SETTINGS_SCHEMA)
        errors = []
        for error in sorted(validator.iter_errors(settings), key=lambda e: list(e.path)):
            location = ".".join(str(part) for part in error.path)
            if location:
                errors.append(f"{location}: {error.message}")
            else:
                errors.append(error.message)

        return errors

    def merge_defaults(self, settings: Dict[str, Any], defaults: Dict[str, Any]) -> Dict[str, Any]:
        """Overlay validated settings onto the defaults, one section deep."""
        merged = {section: dict(values) for section, values in defaults.items()}
        for section, values in settings.items():
            merged.setdefault(section, {}).update(values or {})
        return merged
