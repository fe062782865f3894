"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and chapter listings.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import NoReturn

import typer

from .errors import StageError
from .models.datatypes import Chapter, ChapterRecord


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, StageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_chapter_records(records: Sequence[ChapterRecord], current_id: str | None) -> None:
    """Print `<n>. <title> [<id>]` rows, marking the current chapter with `*`."""

    for index, record in enumerate(records, start=1):
        marker = " *" if record.id == current_id else ""
        typer.echo(f"{index}. {record.title} [{record.id}]{marker}")


def echo_detected_chapters(chapters: Sequence[Chapter]) -> None:
    """Print segmented chapter titles with their content length."""

    for index, chapter in enumerate(chapters, start=1):
        typer.echo(f"{index}. {chapter.title} ({len(chapter.content)} chars)")
