"""react-scaffold -- generates boilerplate files for React components.

Quick usage::

    from react_scaffold import ComponentGenerator, GenerationOptions

    generator = ComponentGenerator(GenerationOptions(output_root="src/components"))
    result = generator.run(["Button"])
"""

from react_scaffold.config import Extension, GenerationOptions
from react_scaffold.generator import ComponentGenerator, GenerationResult
from react_scaffold.prompts import CANCELLED, Prompter

__all__ = [
    "CANCELLED",
    "ComponentGenerator",
    "Extension",
    "GenerationOptions",
    "GenerationResult",
    "Prompter",
]
