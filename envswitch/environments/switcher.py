"""Environment switching: discover, prompt, copy, update the indicator."""

import logging
import os
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from envswitch.config.schemas import DEFAULT_SETTINGS
from envswitch.host import Host, PickItem
from envswitch.utils.errors import (
    ActivationError,
    DiscoveryError,
    EnvSwitchError,
    NoProjectError,
    create_error_suggestions,
)
from envswitch.utils.files import FileManager

from .indicator import StatusIndicator

CONFIG_CENTER_DIR = os.path.join(".vscode", "config-center")
ENV_FILE_PREFIX = ".env."
ACTIVE_ENV_FILE = ".env"

MSG_NO_PROJECT = "Please open a project folder first"
MSG_NO_CANDIDATES = "No .env.* environment files found"
MSG_SWITCHED = "Switched to {suffix} environment"
MSG_FAILED = "Switch failed: {error}"

logger = logging.getLogger(__name__)


class SwitcherState(Enum):
    """Where a switch invocation currently is."""

    IDLE = "idle"
    DISCOVERING = "discovering"
    SELECTING = "selecting"
    ACTIVATING = "activating"


class SwitchOutcome(Enum):
    """How a switch invocation ended."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELLED = "cancelled"
    NO_CANDIDATES = "no-candidates"
    NO_PROJECT = "no-project"


@dataclass
class SwitchResult:
    """Outcome of one switch invocation."""

    outcome: SwitchOutcome
    suffix: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        """False only for outcomes reported as errors."""
        return self.outcome not in (SwitchOutcome.FAILED, SwitchOutcome.NO_PROJECT)


def config_dir_for(project_root: str) -> str:
    """Directory holding the project's environment files."""
    return os.path.join(project_root, CONFIG_CENTER_DIR)


def suffix_of(filename: str) -> str:
    """Environment label of an environment file name."""
    if filename.startswith(ENV_FILE_PREFIX):
        return filename[len(ENV_FILE_PREFIX):]
    return filename


def list_candidates(config_dir: str) -> List[str]:
    """
    List environment files directly inside config_dir.

    Args:
        config_dir: Directory to scan (not recursive)

    Returns:
        List[str]: File names starting with ".env.", in lexical order.
            Empty when the directory does not exist.

    Raises:
        DiscoveryError: If the directory exists but cannot be listed
    """
    try:
        with os.scandir(config_dir) as entries:
            names = [
                entry.name
                for entry in entries
                if entry.name != ACTIVE_ENV_FILE
                and entry.name.startswith(ENV_FILE_PREFIX)
                and entry.is_file()
            ]
    except (FileNotFoundError, NotADirectoryError):
        logger.debug("Config directory %s does not exist", config_dir)
        return []
    except OSError as e:
        raise DiscoveryError(str(e), details=f"Listing {config_dir}") from e

    logger.debug("Found %d environment file(s) in %s", len(names), config_dir)
    return sorted(names)


def prompt_selection(
    candidates: List[str],
    host: Host,
    title: str = DEFAULT_SETTINGS["prompt"]["title"],
    hint: str = DEFAULT_SETTINGS["prompt"]["hint"],
) -> Optional[str]:
    """
    Ask the user to pick one environment file.

    Returns:
        Optional[str]: Chosen file name, or None when the prompt is dismissed
    """
    items = [PickItem(label=name, description=hint) for name in candidates]
    picked = host.pick(items, title)
    if picked is None:
        return None
    return picked.label


def activate(
    config_dir: str,
    project_root: str,
    filename: str,
    indicator: Optional[StatusIndicator] = None,
    indicator_factory: Callable[[], StatusIndicator] = StatusIndicator,
    file_manager: Optional[FileManager] = None,
) -> StatusIndicator:
    """
    Make filename the active environment.

    Copies config_dir/filename over project_root/.env, then points the
    indicator at the file's suffix. filename must come from list_candidates
    for the same config_dir. The indicator is only touched once the copy has
    succeeded.

    Args:
        config_dir: Directory holding the environment files
        project_root: Project folder receiving .env
        filename: Environment file to activate
        indicator: Indicator to update; created with indicator_factory if None
        indicator_factory: Builds the indicator on first activation
        file_manager: File operations helper

    Returns:
        StatusIndicator: The updated indicator

    Raises:
        ActivationError: If the source cannot be read or .env cannot be written
    """
    source = os.path.join(config_dir, filename)
    target = os.path.join(project_root, ACTIVE_ENV_FILE)
    file_manager = file_manager or FileManager()

    try:
        file_manager.replace_file(source, target)
    except OSError as e:
        raise ActivationError(str(e), details=f"{source} -> {target}") from e

    if indicator is None:
        indicator = indicator_factory()
    indicator.update(suffix_of(filename))
    return indicator


def resolve_candidate(candidates: List[str], name: str) -> Optional[str]:
    """Match a file name or a bare suffix against the candidates."""
    if name in candidates:
        return name
    for candidate in candidates:
        if suffix_of(candidate) == name:
            return candidate
    return None


class EnvironmentSwitcher:
    """Runs the switch workflow and owns the status indicator."""

    def __init__(
        self,
        host: Host,
        settings: Optional[Dict[str, Any]] = None,
        file_manager: Optional[FileManager] = None,
    ):
        """
        Initialize switcher.

        Args:
            host: Host used for messages, prompts and drawing the indicator
            settings: Loaded settings (defaults when None)
            file_manager: File operations helper
        """
        self.host = host
        self.settings = settings or DEFAULT_SETTINGS
        self.file_manager = file_manager or FileManager()
        self.indicator: Optional[StatusIndicator] = None
        self.state = SwitcherState.IDLE
        self._activation_lock = threading.Lock()

    def switch_environment(self, project_root: Optional[str]) -> SwitchResult:
        """Interactive switch: prompt the user for the environment."""
        return self._run(project_root)

    def switch_to(self, project_root: Optional[str], name: str) -> SwitchResult:
        """Switch straight to name (a file name or a suffix), without prompting."""
        return self._run(project_root, name=name)

    def dispose(self) -> None:
        """Tear down the indicator at the end of the host session."""
        if self.indicator is not None:
            self.indicator.dispose()
            self.indicator = None

    def _run(self, project_root: Optional[str], name: Optional[str] = None) -> SwitchResult:
        try:
            result = self._switch(project_root, name)
        finally:
            self.state = SwitcherState.IDLE

        logger.debug("Switch finished: %s", result.outcome.value)
        return result

    def _switch(self, project_root: Optional[str], name: Optional[str]) -> SwitchResult:
        if not project_root:
            error = no_project_error()
            self.host.show_error(error.message, suggestions=error.suggestions)
            return SwitchResult(SwitchOutcome.NO_PROJECT, error=error.message)

        config_dir = config_dir_for(project_root)

        self.state = SwitcherState.DISCOVERING
        try:
            candidates = list_candidates(config_dir)
        except DiscoveryError as e:
            return self._fail(e)

        if not candidates:
            self.host.show_info(MSG_NO_CANDIDATES)
            return SwitchResult(SwitchOutcome.NO_CANDIDATES)

        self.state = SwitcherState.SELECTING
        if name is None:
            prompt = self.settings["prompt"]
            filename = prompt_selection(candidates, self.host, title=prompt["title"], hint=prompt["hint"])
            if filename is None:
                return SwitchResult(SwitchOutcome.CANCELLED)
        else:
            filename = resolve_candidate(candidates, name)
            if filename is None:
                return self._fail(
                    EnvSwitchError(
                        f"unknown environment '{name}'",
                        suggestions=[f"Available: {', '.join(suffix_of(c) for c in candidates)}"],
                    )
                )

        self.state = SwitcherState.ACTIVATING
        try:
            with self._activation_lock:
                self.indicator = activate(
                    config_dir,
                    project_root,
                    filename,
                    indicator=self.indicator,
                    indicator_factory=self._create_indicator,
                    file_manager=self.file_manager,
                )
        except ActivationError as e:
            return self._fail(e)

        suffix = suffix_of(filename)
        self.host.show_info(MSG_SWITCHED.format(suffix=suffix))
        return SwitchResult(SwitchOutcome.SUCCEEDED, suffix=suffix)

    def _create_indicator(self) -> StatusIndicator:
        return StatusIndicator(
            alignment=self.settings["indicator"]["alignment"],
            on_change=self.host.render_indicator,
        )

    def _fail(self, error: EnvSwitchError) -> SwitchResult:
        message = MSG_FAILED.format(error=error.message)
        logger.debug("Switch failed: %s", error.details or error.message)
        self.host.show_error(message, suggestions=error.suggestions)
        return SwitchResult(SwitchOutcome.FAILED, error=error.message)


def no_project_error() -> NoProjectError:
    """Error reported when an invocation has no project folder."""
    return NoProjectError(MSG_NO_PROJECT, suggestions=create_error_suggestions("no_project"))


def no_candidates_suggestions(project_root: str) -> List[str]:
    """Hints shown by the CLI when a project has no environment files."""
    return create_error_suggestions("no_candidates", config_dir=config_dir_for(project_root))
