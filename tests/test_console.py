"""Tests for the Rich output helpers (react_scaffold.console)."""

from __future__ import annotations

from pathlib import Path

import pytest

from react_scaffold.console import print_error, print_generated_files, print_info, print_success

pytestmark = pytest.mark.unit


def test_print_generated_files(capsys):
    print_generated_files([Path("Card/Card.tsx"), Path("Card/Card.scss")])
    out = capsys.readouterr().out
    assert "The following files have been generated:" in out
    assert "- Card/Card.tsx" in out
    assert "- Card/Card.scss" in out
    assert out.index("Card.tsx") < out.index("Card.scss") < out.index("Done")


def test_print_error_keeps_brackets(capsys):
    print_error("[Errno 17] File exists: 'Card.tsx'")
    assert "[Errno 17] File exists" in capsys.readouterr().out


def test_print_info(capsys):
    print_info("hello")
    assert "hello" in capsys.readouterr().out


def test_print_success(capsys):
    print_success("Done")
    assert "Done" in capsys.readouterr().out
