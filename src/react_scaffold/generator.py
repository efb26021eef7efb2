"""Component generation orchestrator.

Ties the steps of a run together. Prompts run before the event loop starts;
only the writes are async::

    names     = resolve_component_names(...)   # CLI args or prompt
    selection = collect_file_selection(...)    # language, stylesheet, files
    for name in names:                         # sequential, under asyncio.run
        await writer.write_component(name, selection)   # files concurrent

Quick usage::

    from react_scaffold import ComponentGenerator, GenerationOptions

    generator = ComponentGenerator(GenerationOptions(output_root="src/components"))
    result = generator.run(["Button", "Card"])
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from pathlib import Path

from .config import GenerationOptions
from .options import FileSelection, collect_file_selection
from .prompts import CANCELLED, Prompter, PromptResult
from .resolver import resolve_component_names
from .templates import TemplateRenderer
from .writer import ComponentWriter


@dataclass
class GenerationResult:
    """Files written by one run."""

    output_root: Path
    written: list[Path] = field(default_factory=list)

    def relative_paths(self) -> list[Path]:
        """Written paths relative to the output root, in write order."""
        return [path.relative_to(self.output_root) for path in self.written]


class ComponentGenerator:
    """Generates React component files.

    Args:
        options: Output root and rendering flags.
        prompter: Source of interactive answers. Defaults to a Rich prompter.
        renderer: Template renderer. Defaults to the packaged templates with
            rendering enabled according to ``options.render_templates``.
    """

    def __init__(
        self,
        options: GenerationOptions,
        prompter: Prompter | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.options = options
        self.prompter = prompter or Prompter()
        self.renderer = renderer or TemplateRenderer(enabled=options.render_templates)
        self.writer = ComponentWriter(
            options.output_root,
            self.renderer,
            functional=options.use_functional_style,
        )

    # -- Public API --------------------------------------------------------

    def prepare(self, components: list[str]) -> PromptResult[tuple[list[str], FileSelection]]:
        """Resolve names and ask for options.

        Runs outside any event loop so that Ctrl+C at a prompt raises
        ``KeyboardInterrupt`` in ``input()`` and the prompt returns
        ``CANCELLED``.

        Raises:
            ComponentNameError: *components* failed validation.
        """
        names = resolve_component_names(components, self.options.output_root, self.prompter)
        if names is CANCELLED:
            return CANCELLED

        selection = collect_file_selection(self.prompter)
        if selection is CANCELLED:
            return CANCELLED

        return names, selection

    def run(self, components: list[str]) -> PromptResult[GenerationResult]:
        """Prompt for everything needed, then write every component.

        Returns:
            The written files, or ``CANCELLED`` if any prompt was aborted.
            Nothing is written in the cancelled case.

        Raises:
            ComponentNameError: *components* failed validation.
            FileWriteError: A file could not be written. Files written before
                the failure stay on disk.
        """
        prepared = self.prepare(components)
        if prepared is CANCELLED:
            return CANCELLED
        names, selection = prepared
        return asyncio.run(self.generate(names, selection))

    async def generate(self, names: list[str], selection: FileSelection) -> GenerationResult:
        """Write every component in *names*, one component at a time."""
        result = GenerationResult(output_root=self.options.output_root)
        for name in names:
            component_name = name.strip()
            result.written.extend(
                await self.writer.write_component(component_name, selection)
            )
        return result
