"""Markdown and standalone HTML book exports.

Responsibilities:
- Reassemble the stored book into a single Markdown manuscript.
- Build a self-contained HTML page with title page, table of contents, and
  one section per chapter.
"""

from __future__ import annotations

import html
from pathlib import Path

from ..errors import StageError
from ..io.reassembler import ChapterReassembler
from ..io.storage import BookStore
from ..models.datatypes import BookMetadata
from .filenames import safe_export_filename
from .renderer import MarkdownRenderer
from .styles import HTML_STYLESHEET

DEFAULT_TITLE = "Livre sans titre"
DEFAULT_AUTHOR = "Auteur inconnu"
DEFAULT_LANGUAGE = "fr"
TOC_HEADING = "Table des matières"


def require_exportable(store: BookStore) -> None:
    """Raise when the book has nothing to export."""

    if not store.chapters:
        raise StageError(
            stage="export",
            detail="The book is empty; there is nothing to export.",
            hint="Add at least one chapter or import a manuscript first.",
        )


def display_metadata(metadata: BookMetadata) -> tuple[str, str, str]:
    """Return `(title, author, language)` with export defaults for blank fields."""

    return (
        metadata.title.strip() or DEFAULT_TITLE,
        metadata.author.strip() or DEFAULT_AUTHOR,
        metadata.language.strip() or DEFAULT_LANGUAGE,
    )


def export_markdown(
    store: BookStore,
    output_dir: Path,
    reassembler: ChapterReassembler | None = None,
) -> Path:
    """Write the reassembled manuscript and return its path."""

    require_exportable(store)
    manuscript = (reassembler or ChapterReassembler()).reassemble(store.chapter_payloads())
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / safe_export_filename(store.metadata.title, "md")
    path.write_text(manuscript, encoding="utf-8")
    return path


def build_html_document(store: BookStore, renderer: MarkdownRenderer) -> str:
    """Build the standalone HTML export document."""

    require_exportable(store)
    title, author, language = display_metadata(store.metadata)

    toc_rows = []
    sections = []
    for index, record in enumerate(store.chapters):
        safe_title = html.escape(record.title)
        toc_rows.append(f'<li><a href="#chap-{index}">{safe_title}</a></li>')
        body = renderer.render(store.get_chapter_content(record.id))
        sections.append(
            f'<section id="chap-{index}" class="chapter-section">\n'
            f"<h1>{safe_title}</h1>\n"
            f"{body}\n"
            "</section>\n"
            '<hr class="chapter-divider" />'
        )

    toc_items = "\n".join(toc_rows)
    book_content = "\n".join(sections)
    return f"""<!DOCTYPE html>
<html lang="{html.escape(language)}">
<head>
<meta charset="UTF-8">
<title>{html.escape(title)}</title>
<style>{HTML_STYLESHEET}</style>
</head>
<body>
<div class="title-page">
<h1>{html.escape(title)}</h1>
<h2>{html.escape(author)}</h2>
</div>
<div class="toc-page">
<h2>{TOC_HEADING}</h2>
<ul>
{toc_items}
</ul>
</div>
<div class="book-content">
{book_content}
</div>
</body>
</html>
"""


def export_html(store: BookStore, renderer: MarkdownRenderer, output_dir: Path) -> Path:
    """Write the standalone HTML export and return its path."""

    document = build_html_document(store, renderer)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / safe_export_filename(store.metadata.title, "html")
    path.write_text(document, encoding="utf-8")
    return path
