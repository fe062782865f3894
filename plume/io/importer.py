"""Manuscript reading and import into a book store."""

from __future__ import annotations

from pathlib import Path

from ..errors import StageError
from ..models.datatypes import Chapter
from .chapter_splitter import ChapterSplitter
from .storage import BookStore

SUPPORTED_IMPORT_SUFFIXES = frozenset({".md", ".txt"})


def read_manuscript(path: Path, *, stage: str) -> str:
    """Read a UTF-8 manuscript file, mapping failures to a stage error."""

    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise StageError(
            stage=stage,
            detail=f"Manuscript not found: `{path}`.",
            hint="Check the input path.",
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise StageError(
            stage=stage,
            detail=f"Failed to read manuscript `{path}`: {exc}",
            hint="Save the manuscript as UTF-8 text.",
        ) from exc


def import_manuscript(
    path: Path,
    store: BookStore,
    splitter: ChapterSplitter | None = None,
) -> list[Chapter]:
    """Replace the stored book with the chapters segmented from a manuscript file.

    Raises:
        StageError: For unsupported extensions, unreadable files, or a
            manuscript with no content.
    """

    if path.suffix.lower() not in SUPPORTED_IMPORT_SUFFIXES:
        raise StageError(
            stage="import",
            detail=f"Unsupported manuscript format `{path.suffix or path.name}`.",
            hint="Import a `.md` or `.txt` file.",
        )

    text = read_manuscript(path, stage="import")
    chapters = (splitter or ChapterSplitter()).split(text)
    if not chapters:
        raise StageError(
            stage="import",
            detail=f"No content found in `{path}`; nothing to import.",
        )

    store.import_full_book(chapters)
    return chapters
