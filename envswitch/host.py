"""Host adapters: how the switcher talks to the user."""

import shutil
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

import click

if TYPE_CHECKING:
    from envswitch.environments.indicator import StatusIndicator

CANCEL_INPUTS = ("", "q", "quit")


@dataclass
class PickItem:
    """One entry in a single-choice prompt."""

    label: str
    description: str = ""


class Host(ABC):
    """Interface the switch workflow needs from its host."""

    @abstractmethod
    def show_info(self, message: str) -> None:
        pass

    @abstractmethod
    def show_error(self, message: str, suggestions: Optional[List[str]] = None) -> None:
        """Report an error, with optional hints on how to fix it."""
        pass

    @abstractmethod
    def pick(self, items: List[PickItem], title: str) -> Optional[PickItem]:
        """Ask the user to choose one item; None when dismissed."""
        pass

    @abstractmethod
    def render_indicator(self, indicator: "StatusIndicator") -> None:
        pass


class ConsoleHost(Host):
    """Terminal host built on click."""

    def show_info(self, message: str) -> None:
        click.echo(message)

    def show_error(self, message: str, suggestions: Optional[List[str]] = None) -> None:
        click.echo(f"✗ {message}", err=True)
        for suggestion in suggestions or []:
            click.echo(f"  • {suggestion}", err=True)

    def pick(self, items: List[PickItem], title: str) -> Optional[PickItem]:
        """
        Print a numbered list and read a choice.

        The user may answer with the item number or its label. A blank
        answer, "q", Ctrl-C or end of input dismisses the prompt.
        """
        click.echo(title)
        width = max(len(item.label) for item in items)
        for i, item in enumerate(items, 1):
            line = f"  {i}. {item.label.ljust(width)}"
            if item.description:
                line += f"  - {item.description}"
            click.echo(line)

        while True:
            try:
                answer = click.prompt(
                    "Environment (blank to cancel)",
                    default="",
                    show_default=False,
                )
            except click.Abort:
                click.echo()
                return None

            answer = answer.strip()
            if answer.lower() in CANCEL_INPUTS:
                return None

            if answer.isdigit() and 1 <= int(answer) <= len(items):
                return items[int(answer) - 1]

            for item in items:
                if item.label == answer:
                    return item

            click.echo(f"Invalid choice: {answer}", err=True)

    def render_indicator(self, indicator: "StatusIndicator") -> None:
        if not indicator.visible:
            return

        text = indicator.text
        if indicator.alignment == "right":
            columns = shutil.get_terminal_size().columns
            text = text.rjust(columns - 1)
        click.echo(text)
