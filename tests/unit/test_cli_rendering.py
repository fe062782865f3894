"""Unit tests for CLI output and error rendering helpers."""

from __future__ import annotations

import pytest
import typer

from plume.cli_rendering import (
    echo_chapter_records,
    echo_detected_chapters,
    exit_with_command_error,
)
from plume.errors import BookStoreError, StageError
from plume.models.datatypes import Chapter, ChapterRecord


def test_exit_with_command_error_renders_stage_error_with_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print stage diagnostics and hint before exiting with code 1."""

    error = StageError(
        stage="import",
        detail="Unsupported manuscript format `.docx`.",
        hint="Import a `.md` or `.txt` file.",
    )

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("import", error)

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "import failed at stage `import`: Unsupported manuscript format" in captured.err
    assert "Hint: Import a `.md` or `.txt` file." in captured.err


def test_exit_with_command_error_renders_store_error_without_hint(
    capsys: pytest.CaptureFixture[str],
) -> None:
    with pytest.raises(typer.Exit):
        exit_with_command_error("list-chapters", BookStoreError(detail="broken book.json"))

    captured = capsys.readouterr()
    assert "list-chapters failed at stage `store`: broken book.json" in captured.err
    assert "Hint:" not in captured.err


def test_exit_with_command_error_renders_non_stage_fallback(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Renderer should print fallback exception text for non-stage failures."""

    with pytest.raises(typer.Exit) as exc_info:
        exit_with_command_error("export", RuntimeError("disk full"))

    captured = capsys.readouterr()
    assert exc_info.value.exit_code == 1
    assert "export failed: disk full" in captured.err


def test_echo_chapter_records_marks_current(capsys: pytest.CaptureFixture[str]) -> None:
    records = [ChapterRecord(id="a1", title="Un"), ChapterRecord(id="b2", title="Deux")]

    echo_chapter_records(records, current_id="b2")

    assert capsys.readouterr().out.splitlines() == ["1. Un [a1]", "2. Deux [b2] *"]


def test_echo_detected_chapters_prints_lengths(capsys: pytest.CaptureFixture[str]) -> None:
    echo_detected_chapters([Chapter(title="Introduction", content="été"), Chapter(title="A", content="")])

    assert capsys.readouterr().out.splitlines() == [
        "1. Introduction (3 chars)",
        "2. A (0 chars)",
    ]
