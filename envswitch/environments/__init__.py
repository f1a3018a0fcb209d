"""Environment discovery and switching for envswitch."""

from .detector import ProjectDetector
from .indicator import StatusIndicator
from .switcher import (
    EnvironmentSwitcher,
    SwitchOutcome,
    SwitchResult,
    activate,
    list_candidates,
    prompt_selection,
)

__all__ = [
    "ProjectDetector",
    "StatusIndicator",
    "EnvironmentSwitcher",
    "SwitchOutcome",
    "SwitchResult",
    "activate",
    "list_candidates",
    "prompt_selection",
]
