"""Exceptions raised while resolving names and writing component files.

None of these terminate the process on their own. They propagate up to
``react_scaffold.cli.main``, which prints the message and picks the exit code.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every error reported by react-scaffold."""


# ---------------------------------------------------------------------------
# Name validation
# ---------------------------------------------------------------------------


class ComponentNameError(ScaffoldError):
    """The component name input was rejected."""

    message = "Invalid component name!"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class EmptyInputError(ComponentNameError):
    message = "Name of component may not be empty!"


class DuplicateNameError(ComponentNameError):
    message = "Duplicates not allowed!"


class NameCollisionError(ComponentNameError):
    """A name already exists as an entry under the output root."""

    message = "Component already exists!"

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__()


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------


class FileWriteError(ScaffoldError):
    """Writing a generated file failed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(reason)


class FileAlreadyExistsError(FileWriteError):
    """The target path existed before the exclusive-create write."""
