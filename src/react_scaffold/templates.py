"""Jinja2 template rendering for component files.

Templates live in ``react_scaffold/templates/`` next to this module. Which one
is used depends on the file extension and on whether function or class
components were requested; stylesheets are always created empty.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .config import Extension


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

# (extension, functional) -> template file
_COMPONENT_TEMPLATES: dict[tuple[Extension, bool], str] = {
    (Extension.JSX, True): "functional_jsx.j2",
    (Extension.JSX, False): "class_jsx.j2",
    (Extension.TSX, True): "functional_tsx.j2",
    (Extension.TSX, False): "class_tsx.j2",
}

_TEST_TEMPLATE = "test.j2"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders component, test and stylesheet file bodies.

    Args:
        template_dir: Directory holding the ``.j2`` files. Defaults to the
            templates shipped with the package.
        enabled: When ``False`` every file body is the empty string.
    """

    def __init__(self, template_dir: str | Path | None = None, *, enabled: bool = True) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.enabled = enabled
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["pascal_case"] = _pascal_case_filter

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context."""
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_for_extension(
        self,
        component_name: str,
        extension: Extension,
        functional: bool,
        stylesheet: Extension | None = None,
    ) -> str:
        """Return the source text for ``<component_name>.<extension>``.

        Args:
            component_name: Name of the component, also its file stem.
            extension: Which file is being rendered.
            functional: Render a function component instead of a class.
            stylesheet: Stylesheet extension the component imports, or
                ``None`` to leave the import out.

        Returns:
            The rendered text. Stylesheets and extensions without a template
            render as ``""``.
        """
        context = {
            "name": component_name,
            "stylesheet": stylesheet.value if stylesheet else None,
        }
        template = _COMPONENT_TEMPLATES.get((extension, functional))
        if template is not None:
            return self.render(template, context)
        if extension.is_test:
            return self.render(_TEST_TEMPLATE, context)
        return ""

    def render_file(
        self,
        component_name: str,
        extension: Extension,
        functional: bool,
        stylesheet: Extension | None = None,
    ) -> str:
        """Like :meth:`render_for_extension`, but empty when rendering is disabled."""
        if not self.enabled:
            return ""
        return self.render_for_extension(component_name, extension, functional, stylesheet)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------


def _pascal_case_filter(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``.

    Words that are already capitalised keep their inner casing, so
    ``UserCard`` stays ``UserCard``.
    """
    parts = re.split(r"[-_\s.]+", value)
    return "".join(word[:1].upper() + word[1:] for word in parts if word)
