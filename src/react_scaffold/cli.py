"""Command line entry point.

Usage::

    react-scaffold Button Card --path src/components
    react-scaffold --functional --no-template
    react-scaffold Card --no-template --save-config scaffold.json
    python -m react_scaffold Header

This is the only module that ends the process; everything below it reports
failures by raising or by returning ``CANCELLED``.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from .config import GenerationOptions
from .console import console, print_error, print_generated_files
from .errors import ComponentNameError, FileWriteError
from .generator import ComponentGenerator
from .prompts import CANCELLED, Prompter

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="react-scaffold",
        description="Generate boilerplate files for React components",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  react-scaffold Button Card\n"
            "  react-scaffold Header -p src/components --functional\n"
            "  react-scaffold --no-template\n"
        ),
    )
    parser.add_argument(
        "components",
        nargs="*",
        help="Component names (prompted for when omitted)",
    )
    parser.add_argument(
        "--path", "-p",
        default=None,
        help="Output directory (default: components)",
    )
    parser.add_argument(
        "--template",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Fill files with template code (default: on)",
    )
    style = parser.add_mutually_exclusive_group()
    style.add_argument(
        "--functional", "-f",
        dest="functional",
        action="store_true",
        default=None,
        help="Generate function components",
    )
    style.add_argument(
        "--class",
        dest="functional",
        action="store_false",
        default=None,
        help="Generate class components (default)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="JSON file with saved options",
    )
    parser.add_argument(
        "--save-config",
        default=None,
        metavar="FILE",
        help="Write the resolved options to FILE as JSON before generating",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Do not print the list of generated files",
    )
    return parser


def load_options(args: argparse.Namespace) -> GenerationOptions:
    """Combine defaults, environment, ``--config`` and flags, later wins."""
    base = GenerationOptions.from_env()
    if args.config:
        base = base.merged(**GenerationOptions.load(Path(args.config)).model_dump(exclude_unset=True))
    return base.merged(
        output_root=Path(args.path) if args.path else None,
        render_templates=args.template,
        use_functional_style=args.functional,
    )


def run(argv: list[str] | None = None, prompter: Prompter | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        options = load_options(args)
    except (OSError, ValueError, ValidationError) as exc:
        print_error(f"Invalid configuration: {exc}")
        return EXIT_FAILURE

    if args.save_config:
        try:
            options.save(Path(args.save_config))
        except OSError as exc:
            print_error(f"Could not save configuration: {exc}")
            return EXIT_FAILURE

    generator = ComponentGenerator(options, prompter=prompter)
    try:
        result = generator.run(args.components)
    except ComponentNameError as exc:
        console.print(str(exc), markup=False)
        return EXIT_FAILURE
    except FileWriteError as exc:
        print_error(f"An unexpected error occurred while writing the files. {exc}")
        return EXIT_FAILURE

    if result is CANCELLED:
        return EXIT_FAILURE

    if not args.quiet:
        print_generated_files(result.relative_paths())
    return EXIT_OK


def main() -> None:
    """Console script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
