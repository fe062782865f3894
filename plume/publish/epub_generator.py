"""EPUB export built with EbookLib.

Produces an EPUB 3 package with an EPUB 2 NCX table of contents:
- `title.xhtml` title page with book title and author
- `nav.xhtml` navigation document
- `chapter_<n>.xhtml` per chapter, each opening with an `<h1>` title
- `style.css` shared by every document
"""

from __future__ import annotations

from datetime import datetime, timezone
import html
from pathlib import Path
import uuid

from ebooklib import epub
from loguru import logger

from ..io.storage import BookStore
from .exporters import display_metadata, require_exportable
from .filenames import safe_export_filename
from .renderer import MarkdownRenderer
from .styles import EPUB_STYLESHEET


class EpubGenerator:
    """Generate an EPUB file from the stored book."""

    def __init__(self, store: BookStore, renderer: MarkdownRenderer) -> None:
        self.store = store
        self.renderer = renderer
        self.book = epub.EpubBook()
        self.stylesheet = epub.EpubItem(
            uid="style",
            file_name="style.css",
            media_type="text/css",
            content=EPUB_STYLESHEET,
        )
        self.title_page: epub.EpubHtml | None = None
        self.chapters: list[epub.EpubHtml] = []

    def generate(self, output_dir: Path) -> Path:
        """Write the EPUB into `output_dir` and return its path.

        Raises:
            StageError: If the book has no chapters.
        """

        require_exportable(self.store)
        title, author, language = display_metadata(self.store.metadata)

        self._setup_book_metadata(title, author, language)
        self.book.add_item(self.stylesheet)
        self._generate_title_page(title, author, language)
        self._generate_chapters(language)
        self._generate_toc()
        self.book.spine = [self.title_page, "nav", *self.chapters]

        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / safe_export_filename(self.store.metadata.title, "epub")
        epub.write_epub(str(path), self.book)
        logger.debug(f"EPUB written: {path} ({len(self.chapters)} chapters)")
        return path

    def _setup_book_metadata(self, title: str, author: str, language: str) -> None:
        self.book.set_identifier(f"urn:uuid:{uuid.uuid4()}")
        self.book.set_title(title)
        self.book.set_language(language)
        self.book.add_author(author)
        self.book.add_metadata(
            "DC", "date", datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        )

    def _generate_title_page(self, title: str, author: str, language: str) -> None:
        page = epub.EpubHtml(uid="titlepage", title=title, file_name="title.xhtml", lang=language)
        page.content = (
            '<div class="title-page">'
            f"<h1>{html.escape(title)}</h1>"
            f"<h2>{html.escape(author)}</h2>"
            "</div>"
        )
        page.add_item(self.stylesheet)
        self.book.add_item(page)
        self.title_page = page

    def _generate_chapters(self, language: str) -> None:
        for play_order, record in enumerate(self.store.chapters, start=1):
            body = self.renderer.render(self.store.get_chapter_content(record.id))
            chapter = epub.EpubHtml(
                uid=f"chapter_{play_order}",
                title=record.title,
                file_name=f"chapter_{play_order}.xhtml",
                lang=language,
            )
            chapter.content = f"<h1>{html.escape(record.title)}</h1>\n{body}"
            chapter.add_item(self.stylesheet)
            self.book.add_item(chapter)
            self.chapters.append(chapter)

    def _generate_toc(self) -> None:
        self.book.toc = tuple(
            epub.Link(chapter.file_name, chapter.title, chapter.id) for chapter in self.chapters
        )
        self.book.add_item(epub.EpubNcx())
        self.book.add_item(epub.EpubNav())


def export_epub(store: BookStore, renderer: MarkdownRenderer, output_dir: Path) -> Path:
    """Write the EPUB export and return its path."""

    return EpubGenerator(store, renderer).generate(output_dir)
