"""Resolve the component names for a run.

Names come either from the command line or from an interactive prompt. Both
paths share one validation rule so that a name list is accepted or rejected
the same way regardless of where it was typed.
"""

from __future__ import annotations

from pathlib import Path

from .errors import ComponentNameError, DuplicateNameError, EmptyInputError, NameCollisionError
from .prompts import CANCELLED, Prompter, PromptResult


def format_input(raw: str) -> list[str]:
    """Trim *raw* and split it on single spaces."""
    return raw.strip().split(" ")


def validate_input(raw: str, output_root: str | Path) -> list[str]:
    """Validate a space separated list of component names.

    Args:
        raw: Names as typed, e.g. ``"Button Card"``.
        output_root: Directory the components will be generated into.

    Returns:
        The distinct names in input order.

    Raises:
        EmptyInputError: *raw* is empty or whitespace only.
        DuplicateNameError: A name appears more than once.
        NameCollisionError: A name already exists under *output_root*.
    """
    if raw.strip() == "":
        raise EmptyInputError()
    names = format_input(raw)
    if len(set(names)) != len(names):
        raise DuplicateNameError()
    root = Path(output_root)
    for name in names:
        if (root / name).exists():
            raise NameCollisionError(name)
    return names


def resolve_component_names(
    names: list[str],
    output_root: str | Path,
    prompter: Prompter,
) -> PromptResult[list[str]]:
    """Return validated component names, prompting when none were given.

    Names passed by the caller are validated once and any
    ``ComponentNameError`` propagates. Interactive answers are re-asked until
    they validate; an aborted prompt returns ``CANCELLED``.
    """
    if names:
        return validate_input(" ".join(names), output_root)

    def _check(answer: str) -> str | None:
        try:
            validate_input(answer, output_root)
        except ComponentNameError as exc:
            return str(exc)
        return None

    answer = prompter.text("Enter component name(s)", validate=_check)
    if answer is CANCELLED:
        return CANCELLED
    return format_input(answer)
