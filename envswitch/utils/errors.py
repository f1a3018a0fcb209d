"""Error handling utilities for envswitch."""

import sys
import traceback
from typing import Optional

import click


class EnvSwitchError(Exception):
    """Base exception for envswitch errors."""

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        suggestions: Optional[list] = None,
    ):
        self.message = message
        self.details = details
        self.suggestions = suggestions or []
        super().__init__(message)


class ConfigurationError(EnvSwitchError):
    """Raised when the settings file is invalid."""

    pass


class NoProjectError(EnvSwitchError):
    """Raised when no project folder is available."""

    pass


class DiscoveryError(EnvSwitchError):
    """Raised when the config directory cannot be listed."""

    pass


class ActivationError(EnvSwitchError):
    """Raised when an environment file cannot be copied over the active .env."""

    pass


class ErrorHandler:
    """Handles and formats errors for user-friendly display."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def handle_error(self, error: Exception, context: Optional[str] = None) -> None:
        """
        Handle and display error with appropriate formatting.

        Args:
            error: Exception to handle
            context: Optional context about when/where error occurred
        """
        if isinstance(error, EnvSwitchError):
            self._handle_envswitch_error(error, context)
        else:
            self._handle_generic_error(error, context)

    def _handle_envswitch_error(self, error: EnvSwitchError, context: Optional[str]) -> None:
        """Handle envswitch-specific errors."""
        click.echo(f"✗ {error.message}", err=True)

        if context:
            click.echo(f"Context: {context}", err=True)

        if error.details:
            click.echo(f"Details: {error.details}", err=True)

        if error.suggestions:
            click.echo("\nSuggestions:", err=True)
            for suggestion in error.suggestions:
                click.echo(f"  • {suggestion}", err=True)

        if self.verbose:
            click.echo("\nFull traceback:", err=True)
            traceback.print_exc()

    def _handle_generic_error(self, error: Exception, context: Optional[str]) -> None:
        """Handle generic Python exceptions."""
        error_type = type(error).__name__

        if isinstance(error, FileNotFoundError):
            message = f"File not found: {error}"
            suggestions = create_error_suggestions("file_missing")
        elif isinstance(error, PermissionError):
            message = f"Permission denied: {error}"
            suggestions = create_error_suggestions("permission_denied")
        else:
            message = f"{error_type}: {error}"
            suggestions = []

        click.echo(f"✗ {message}", err=True)

        if context:
            click.echo(f"Context: {context}", err=True)

        if suggestions:
            click.echo("\nSuggestions:", err=True)
            for suggestion in suggestions:
                click.echo(f"  • {suggestion}", err=True)

        if self.verbose:
            click.echo("\nFull traceback:", err=True)
            traceback.print_exc()

    def exit_with_error(self, error: Exception, context: Optional[str] = None, exit_code: int = 1) -> None:
        """Handle error and exit with specified code."""
        self.handle_error(error, context)
        sys.exit(exit_code)


def create_error_suggestions(error_type: str, **kwargs) -> list:
    """
    Create contextual error suggestions based on error type.

    Args:
        error_type: Type of error
        **kwargs: Additional context information

    Returns:
        list: List of suggestion strings
    """
    suggestions = {
        "no_project": [
            "Run the command from inside a project folder",
            "Pass the project folder with --project",
        ],
        "no_candidates": [
            f"Add files named .env.<name> to {kwargs.get('config_dir', '.vscode/config-center')}",
        ],
        "file_missing": [
            "Check that the file path is correct",
            "Ensure the file exists and is readable",
        ],
        "permission_denied": [
            "Check file/directory permissions",
            "Make sure the project folder is writable",
        ],
        "settings_invalid": [
            "Check YAML syntax in .vscode/envswitch.yml",
            "Remove unknown keys from the settings file",
        ],
    }

    return suggestions.get(error_type, [])


def format_validation_errors(errors: list) -> str:
    """
    Format validation errors for display.

    Args:
        errors: List of validation error messages

    Returns:
        str: Formatted error message
    """
    if not errors:
        return "No validation errors"

    if len(errors) == 1:
        return f"Validation error: {errors[0]}"

    formatted = "Validation errors:\n"
    for i, error in enumerate(errors, 1):
        formatted += f"  {i}. {error}\n"

    return formatted.strip()
