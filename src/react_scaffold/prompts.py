"""Interactive prompts built on ``rich.prompt``.

Every prompt returns either the answer or the ``CANCELLED`` marker when the
user aborts (Ctrl+C or end of input). Callers branch on the marker instead of
the prompt terminating the process itself.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from rich.console import Console
from rich.prompt import Confirm, Prompt

from . import console as console_mod

T = TypeVar("T")


class Cancelled:
    """Marker type for a prompt the user aborted."""

    _instance: "Cancelled | None" = None

    def __new__(cls) -> "Cancelled":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "CANCELLED"

    def __bool__(self) -> bool:
        return False


CANCELLED = Cancelled()

PromptResult = Union[T, Cancelled]


@dataclass(frozen=True)
class Choice(Generic[T]):
    """One option of a select or multi-select prompt."""

    title: str
    value: T
    selected: bool = False


class Prompter:
    """Asks questions on a Rich console.

    Args:
        console: Console used for both the question and the answer. Defaults
            to the shared react-scaffold console.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or console_mod.console

    def text(
        self,
        message: str,
        *,
        validate: Callable[[str], str | None] | None = None,
    ) -> PromptResult[str]:
        """Ask for free text.

        *validate* returns an error message to reject the answer, or ``None``
        to accept it. Rejected answers print the message and ask again.
        """
        while True:
            try:
                answer = Prompt.ask(message, console=self.console, default="", show_default=False)
            except (KeyboardInterrupt, EOFError):
                return CANCELLED
            error = validate(answer) if validate else None
            if error is None:
                return answer
            self.console.print(error, style="bold red", markup=False)

    def select(
        self,
        message: str,
        choices: Sequence[Choice[T]],
        *,
        initial: int = 0,
    ) -> PromptResult[T]:
        """Ask the user to pick exactly one of *choices*."""
        for choice in choices:
            self.console.print(f"  [cyan]{choice.value}[/cyan]  {choice.title}")
        by_key = {str(choice.value): choice.value for choice in choices}
        try:
            answer = Prompt.ask(
                message,
                console=self.console,
                choices=list(by_key),
                default=str(choices[initial].value),
            )
        except (KeyboardInterrupt, EOFError):
            return CANCELLED
        return by_key[answer]

    def multiselect(self, message: str, choices: Sequence[Choice[T]]) -> PromptResult[list[T]]:
        """Ask a yes/no question per choice; answers default to ``selected``."""
        self.console.print(message)
        picked: list[T] = []
        for choice in choices:
            try:
                keep = Confirm.ask(f"  {choice.title}", console=self.console, default=choice.selected)
            except (KeyboardInterrupt, EOFError):
                return CANCELLED
            if keep:
                picked.append(choice.value)
        return picked
