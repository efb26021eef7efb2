"""react-scaffold configuration.

Typed options for a generation run. ``GenerationOptions`` uses Pydantic v2 so
values coming from the environment, a JSON file or the command line are all
validated the same way.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Extensions
# ---------------------------------------------------------------------------


class Extension(str, Enum):
    """File suffix that also identifies the rendering variant."""

    JS = "js"
    JSX = "jsx"
    TS = "ts"
    TSX = "tsx"
    CSS = "css"
    SCSS = "scss"
    SASS = "sass"
    TEST_JS = "test.js"
    TEST_TS = "test.ts"

    def __str__(self) -> str:
        return self.value

    @property
    def is_stylesheet(self) -> bool:
        return self in STYLESHEETS

    @property
    def is_test(self) -> bool:
        return self in (Extension.TEST_JS, Extension.TEST_TS)


LANGUAGES: tuple[Extension, ...] = (Extension.JSX, Extension.TSX)
STYLESHEETS: tuple[Extension, ...] = (Extension.CSS, Extension.SCSS, Extension.SASS)

DEFAULT_LANGUAGE = Extension.TSX
DEFAULT_STYLESHEET = Extension.SCSS


def extension_for_tests(language: Extension) -> Extension:
    """Return the test file extension matching *language*."""
    return Extension.TEST_JS if language == Extension.JSX else Extension.TEST_TS


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


class GenerationOptions(BaseModel):
    """Caller-supplied settings for one generation run."""

    output_root: Path = Field(
        default=Path("components"),
        description="Directory under which one folder per component is created",
    )
    render_templates: bool = Field(
        default=True,
        description="Write template bodies; when False every file is created empty",
    )
    use_functional_style: bool = Field(
        default=False,
        description="Render function components instead of class components",
    )

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the options to a JSON file and return its path."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "GenerationOptions":
        """Load options previously written by :meth:`save`."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "GenerationOptions":
        """Build options from environment variables.

        Recognised variables (all optional):
            REACT_SCAFFOLD_PATH, REACT_SCAFFOLD_TEMPLATE,
            REACT_SCAFFOLD_FUNCTIONAL.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("REACT_SCAFFOLD_PATH"):
            kwargs["output_root"] = Path(os.environ["REACT_SCAFFOLD_PATH"])
        if os.environ.get("REACT_SCAFFOLD_TEMPLATE"):
            kwargs["render_templates"] = _parse_bool(
                "REACT_SCAFFOLD_TEMPLATE", os.environ["REACT_SCAFFOLD_TEMPLATE"]
            )
        if os.environ.get("REACT_SCAFFOLD_FUNCTIONAL"):
            kwargs["use_functional_style"] = _parse_bool(
                "REACT_SCAFFOLD_FUNCTIONAL", os.environ["REACT_SCAFFOLD_FUNCTIONAL"]
            )
        return cls(**kwargs)

    def merged(self, **overrides: Any) -> "GenerationOptions":
        """Return a copy with every non-``None`` override applied."""
        updates = {key: value for key, value in overrides.items() if value is not None}
        return self.model_copy(update=updates)
