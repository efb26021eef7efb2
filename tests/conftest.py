"""Shared pytest fixtures for the react-scaffold test suite.

Provides:
- A scripted prompter that replays canned answers instead of reading stdin
- An output root under ``tmp_path``
- Ready-made file selections
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest

from react_scaffold.config import Extension, GenerationOptions
from react_scaffold.options import FileSelection
from react_scaffold.prompts import CANCELLED, Choice, Prompter


# ---------------------------------------------------------------------------
# Prompter
# ---------------------------------------------------------------------------


class ScriptedPrompter(Prompter):
    """Prompter that answers from a queue.

    Each queued item answers one prompt call. Put ``CANCELLED`` in the queue
    to simulate the user aborting that prompt. Rejected text answers are
    recorded in ``errors`` and the next queued answer is used.
    """

    def __init__(self, answers: Sequence[Any]) -> None:
        super().__init__()
        self.answers: deque[Any] = deque(answers)
        self.asked: list[str] = []
        self.errors: list[str] = []
        self.choices_seen: dict[str, list[Choice[Any]]] = {}

    def _next(self, message: str) -> Any:
        self.asked.append(message)
        if not self.answers:
            raise AssertionError(f"No scripted answer left for prompt {message!r}")
        return self.answers.popleft()

    def text(self, message: str, *, validate: Callable[[str], str | None] | None = None):
        while True:
            answer = self._next(message)
            if answer is CANCELLED:
                return CANCELLED
            error = validate(answer) if validate else None
            if error is None:
                return answer
            self.errors.append(error)

    def select(self, message: str, choices, *, initial: int = 0):
        self.choices_seen[message] = list(choices)
        answer = self._next(message)
        if answer is None:
            return choices[initial].value
        return answer

    def multiselect(self, message: str, choices):
        self.choices_seen[message] = list(choices)
        answer = self._next(message)
        if answer is None:
            return [choice.value for choice in choices if choice.selected]
        return answer


@pytest.fixture
def scripted_prompter() -> Callable[..., ScriptedPrompter]:
    """Factory: ``scripted_prompter("Card", Extension.TSX, ...)``."""

    def _make(*answers: Any) -> ScriptedPrompter:
        return ScriptedPrompter(answers)

    return _make


# ---------------------------------------------------------------------------
# Paths & options
# ---------------------------------------------------------------------------


@pytest.fixture
def output_root(tmp_path: Path) -> Path:
    """Output root that does not exist yet."""
    return tmp_path / "components"


@pytest.fixture
def options(output_root: Path) -> GenerationOptions:
    """Class components with templates, written under ``output_root``."""
    return GenerationOptions(
        output_root=output_root,
        render_templates=True,
        use_functional_style=False,
    )


@pytest.fixture
def tsx_scss_all() -> FileSelection:
    """TypeScript + SCSS with every file selected."""
    return FileSelection(
        language=Extension.TSX,
        stylesheet=Extension.SCSS,
        files=[Extension.TSX, Extension.SCSS, Extension.TEST_TS],
    )


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ``REACT_SCAFFOLD_*`` variables from the host out of the tests."""
    for var in ("REACT_SCAFFOLD_PATH", "REACT_SCAFFOLD_TEMPLATE", "REACT_SCAFFOLD_FUNCTIONAL"):
        monkeypatch.delenv(var, raising=False)
