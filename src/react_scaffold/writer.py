"""Plan and write the files of one component.

Files are created with exclusive-create semantics: an existing path is an
error, never overwritten. All files of a component are written concurrently
and awaited together.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path

from .config import Extension
from .errors import FileAlreadyExistsError, FileWriteError
from .options import FileSelection
from .templates import TemplateRenderer


@dataclass(frozen=True)
class FilePlan:
    """One file to be written."""

    directory: Path
    component_name: str
    extension: Extension

    @property
    def path(self) -> Path:
        return self.directory / f"{self.component_name}.{self.extension.value}"


def plan_files(output_root: str | Path, component_name: str, extensions: list[Extension]) -> list[FilePlan]:
    """Return one ``FilePlan`` per extension under ``output_root/component_name``."""
    directory = Path(output_root) / component_name
    return [FilePlan(directory, component_name, ext) for ext in extensions]


def _write_exclusive(path: Path, content: str) -> None:
    with path.open("x", encoding="utf-8") as fh:
        fh.write(content)


class ComponentWriter:
    """Writes component directories under *output_root*.

    Args:
        output_root: Parent directory of every component directory.
        renderer: Produces the file bodies.
        functional: Passed to the renderer for component files.
    """

    def __init__(self, output_root: str | Path, renderer: TemplateRenderer, *, functional: bool) -> None:
        self.output_root = Path(output_root)
        self.renderer = renderer
        self.functional = functional

    async def write_file(self, plan: FilePlan, stylesheet: Extension | None) -> Path:
        """Render and exclusively create a single planned file.

        Raises:
            FileAlreadyExistsError: The target path already exists.
            FileWriteError: Any other OS error while writing.
        """
        content = self.renderer.render_file(
            plan.component_name, plan.extension, self.functional, stylesheet
        )
        path = plan.path
        try:
            await asyncio.to_thread(_write_exclusive, path, content)
        except FileExistsError as exc:
            raise FileAlreadyExistsError(path, str(exc)) from exc
        except OSError as exc:
            raise FileWriteError(path, str(exc)) from exc
        return path

    async def write_component(self, component_name: str, selection: FileSelection) -> list[Path]:
        """Create the component directory and write every selected file.

        The first failing write is re-raised once it happens. Writes that are
        already running are neither cancelled nor rolled back.

        Returns:
            Written paths in the order of ``selection.files``.
        """
        plans = plan_files(self.output_root, component_name, selection.files)
        directory = self.output_root / component_name
        await asyncio.to_thread(directory.mkdir, parents=True, exist_ok=True)

        stylesheet = selection.stylesheet_tag
        written = await asyncio.gather(
            *(self.write_file(plan, stylesheet) for plan in plans)
        )
        return list(written)
