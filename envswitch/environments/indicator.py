"""Status indicator showing the active environment."""

from typing import Callable, Optional

INDICATOR_ICON = "🟢"
ALIGNMENTS = ("left", "right")


class StatusIndicator:
    """
    Short status text naming the currently active environment.

    The indicator starts hidden with no suffix. ``update`` sets the suffix and
    shows it; ``dispose`` tears it down for good. The optional ``on_change``
    callback is how a host redraws it.
    """

    def __init__(
        self,
        alignment: str = "right",
        on_change: Optional[Callable[["StatusIndicator"], None]] = None,
    ):
        if alignment not in ALIGNMENTS:
            raise ValueError(f"Unknown indicator alignment: {alignment}")
        self.alignment = alignment
        self.on_change = on_change
        self.suffix: Optional[str] = None
        self.visible = False
        self.disposed = False

    @property
    def text(self) -> str:
        """Text drawn by the host, empty before the first update."""
        if self.suffix is None:
            return ""
        return f"{INDICATOR_ICON} current environment: {self.suffix}"

    def update(self, suffix: str) -> None:
        """Show ``suffix`` as the current environment."""
        if self.disposed:
            raise RuntimeError("Status indicator has been disposed")
        self.suffix = suffix
        self.visible = True
        self._notify()

    def hide(self) -> None:
        if self.disposed or not self.visible:
            return
        self.visible = False
        self._notify()

    def dispose(self) -> None:
        """Hide the indicator and release the host callback."""
        if self.disposed:
            return
        self.hide()
        self.disposed = True
        self.on_change = None

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change(self)

    def __repr__(self) -> str:
        return f"StatusIndicator(suffix={self.suffix!r}, visible={self.visible}, disposed={self.disposed})"
