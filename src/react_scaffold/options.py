"""Collect the language, stylesheet and file choices for a run."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .config import (
    DEFAULT_LANGUAGE,
    DEFAULT_STYLESHEET,
    LANGUAGES,
    STYLESHEETS,
    Extension,
    extension_for_tests,
)
from .prompts import CANCELLED, Choice, Prompter, PromptResult

LANGUAGE_TITLES: dict[Extension, str] = {
    Extension.JSX: "JavaScript (.jsx)",
    Extension.TSX: "TypeScript (.tsx)",
}


class FileSelection(BaseModel):
    """Answers to the option prompts."""

    language: Extension = Field(default=DEFAULT_LANGUAGE)
    stylesheet: Extension = Field(default=DEFAULT_STYLESHEET)
    files: list[Extension] = Field(
        default_factory=list,
        description="Extensions to generate for every component, in prompt order",
    )

    @property
    def stylesheet_selected(self) -> bool:
        """Whether a stylesheet file is among the files to generate."""
        return any(ext.is_stylesheet for ext in self.files)

    @property
    def stylesheet_tag(self) -> Extension | None:
        """Stylesheet the component template should import, if any."""
        return self.stylesheet if self.stylesheet_selected else None


def file_choices(language: Extension, stylesheet: Extension) -> list[Choice[Extension]]:
    """The three generatable files, all pre-selected."""
    test_ext = extension_for_tests(language)
    return [
        Choice(f"Component file (.{language.value})", language, selected=True),
        Choice(f"Stylesheet (.{stylesheet.value})", stylesheet, selected=True),
        Choice(f"Tests (.{test_ext.value})", test_ext, selected=True),
    ]


def collect_file_selection(prompter: Prompter) -> PromptResult[FileSelection]:
    """Ask for language, stylesheet and files; ``CANCELLED`` on any abort."""
    language = prompter.select(
        "Select language",
        [Choice(LANGUAGE_TITLES[ext], ext) for ext in LANGUAGES],
        initial=LANGUAGES.index(DEFAULT_LANGUAGE),
    )
    if language is CANCELLED:
        return CANCELLED

    stylesheet = prompter.select(
        "Select stylesheet language",
        [Choice(ext.value, ext) for ext in STYLESHEETS],
        initial=STYLESHEETS.index(DEFAULT_STYLESHEET),
    )
    if stylesheet is CANCELLED:
        return CANCELLED

    files = prompter.multiselect(
        "Which files would you like to generate?",
        file_choices(language, stylesheet),
    )
    if files is CANCELLED:
        return CANCELLED

    return FileSelection(language=language, stylesheet=stylesheet, files=files)
