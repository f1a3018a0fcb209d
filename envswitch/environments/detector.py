"""Project root detection for envswitch."""

import os
from typing import Optional

PROJECT_MARKERS = (".vscode", ".git")


class ProjectDetector:
    """Finds the project folder an invocation works on."""

    def __init__(self, path: Optional[str] = None):
        """Initialize detector with optional starting path."""
        self.path = path or os.getcwd()

    def find_project_root(self, explicit: Optional[str] = None) -> Optional[str]:
        """
        Find the project root.

        An explicit path wins when it is an existing directory; an explicit
        path that does not exist means there is no project. Otherwise the
        search walks up from the starting path to the first directory holding
        one of the project markers.

        Args:
            explicit: Project folder given by the user

        Returns:
            Optional[str]: Absolute project root or None
        """
        if explicit:
            if os.path.isdir(explicit):
                return os.path.abspath(explicit)
            return None

        current = os.path.abspath(self.path)
        while True:
            if self.is_project_root(current):
                return current

            parent = os.path.dirname(current)
            if parent == current:
                return None
            current = parent

    def is_project_root(self, path: str) -> bool:
        """Check if path holds a project marker."""
        for marker in PROJECT_MARKERS:
            if os.path.exists(os.path.join(path, marker)):
                return True
        return False
