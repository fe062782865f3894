"""File-backed book storage.

Responsibilities:
- Persist book metadata, ordered chapter records, and the current chapter id
  in `book.json`, with one `chapters/<id>.md` file per chapter body.
- Provide chapter CRUD used by the CLI, import, and export flows.
- Remove orphaned chapter files on every save.

Key types:
- `BookStore`: single-book store rooted at a project directory.
"""

from __future__ import annotations

import json
from pathlib import Path
import uuid

from ..errors import BookStoreError
from ..models.datatypes import BookMetadata, Chapter, ChapterRecord

BOOK_FILE_NAME = "book.json"
CHAPTERS_DIR_NAME = "chapters"
CHAPTER_FILE_SUFFIX = ".md"
DEFAULT_CHAPTER_TITLE = "Chapitre 1"
_METADATA_KEYS = frozenset({"title", "author", "language"})


class BookStore:
    """Persist one book as JSON metadata plus Markdown chapter files."""

    def __init__(self, root: Path) -> None:
        """Initialize the store with a project root directory."""

        self.root = root
        self.metadata = BookMetadata()
        self.current_chapter_id: str | None = None
        self._chapters: list[ChapterRecord] = []
        self._contents: dict[str, str] = {}

    @property
    def chapters(self) -> tuple[ChapterRecord, ...]:
        """Ordered chapter records."""

        return tuple(self._chapters)

    @property
    def book_path(self) -> Path:
        return self.root / BOOK_FILE_NAME

    @property
    def chapters_dir(self) -> Path:
        return self.root / CHAPTERS_DIR_NAME

    def load(self) -> BookStore:
        """Load persisted state, creating a first chapter for an empty book."""

        if self.book_path.exists():
            payload = self._read_payload()
            raw_metadata = payload.get("metadata") or {}
            self.metadata = BookMetadata(
                title=str(raw_metadata.get("title", "")),
                author=str(raw_metadata.get("author", "")),
                language=str(raw_metadata.get("language", "fr")) or "fr",
            )
            self._chapters = [
                ChapterRecord(id=str(item["id"]), title=str(item["title"]))
                for item in payload.get("chapters") or []
            ]
            current = payload.get("current_chapter_id")
            self.current_chapter_id = str(current) if current else None
            self._contents = {
                record.id: self._read_chapter_file(record.id) for record in self._chapters
            }

        if not self._chapters:
            self.add_chapter(DEFAULT_CHAPTER_TITLE, persist=False)
        elif self._find_index(self.current_chapter_id) is None:
            self.current_chapter_id = self._chapters[0].id
        return self

    def save(self) -> None:
        """Write metadata and chapter files, then delete orphaned chapter files."""

        self.chapters_dir.mkdir(parents=True, exist_ok=True)
        payload = {
            "metadata": self.metadata.as_payload(),
            "chapters": [{"id": record.id, "title": record.title} for record in self._chapters],
            "current_chapter_id": self.current_chapter_id,
        }
        self.book_path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True),
            encoding="utf-8",
        )

        valid_names = set()
        for record in self._chapters:
            path = self._chapter_path(record.id)
            path.write_text(self._contents.get(record.id, ""), encoding="utf-8")
            valid_names.add(path.name)

        for path in self.chapters_dir.glob(f"*{CHAPTER_FILE_SUFFIX}"):
            if path.name not in valid_names:
                path.unlink()

    def get_chapter(self, chapter_id: str) -> ChapterRecord | None:
        """Return the record for an id, or `None`."""

        index = self._find_index(chapter_id)
        return self._chapters[index] if index is not None else None

    def get_chapter_content(self, chapter_id: str) -> str:
        """Return a chapter body, or an empty string for unknown ids."""

        return self._contents.get(chapter_id, "")

    def update_chapter_content(self, chapter_id: str, content: str) -> bool:
        """Replace a chapter body and persist it."""

        if self._find_index(chapter_id) is None:
            return False
        self._contents[chapter_id] = content
        self.save()
        return True

    def update_metadata(self, key: str, value: str, *, persist: bool = True) -> bool:
        """Update one metadata field (`title`, `author`, or `language`)."""

        if key not in _METADATA_KEYS:
            return False
        setattr(self.metadata, key, value)
        if persist:
            self.save()
        return True

    def set_current_chapter(self, chapter_id: str) -> bool:
        """Select a chapter as current."""

        if self._find_index(chapter_id) is None:
            return False
        self.current_chapter_id = chapter_id
        self.save()
        return True

    def add_chapter(
        self,
        title: str,
        after_id: str | None = None,
        *,
        persist: bool = True,
    ) -> str:
        """Insert a new empty chapter after `after_id` (or at the end) and return its id."""

        record = ChapterRecord(id=str(uuid.uuid4()), title=title)
        self._contents[record.id] = ""

        insert_index = self._find_index(after_id)
        if insert_index is None:
            self._chapters.append(record)
        else:
            self._chapters.insert(insert_index + 1, record)

        if self.current_chapter_id is None:
            self.current_chapter_id = record.id
        if persist:
            self.save()
        return record.id

    def rename_chapter(self, chapter_id: str, new_title: str) -> bool:
        """Rename a chapter; blank titles are refused."""

        title = new_title.strip() if new_title else ""
        index = self._find_index(chapter_id)
        if not title or index is None:
            return False
        self._chapters[index] = ChapterRecord(id=chapter_id, title=title)
        self.save()
        return True

    def delete_chapter(self, chapter_id: str) -> bool:
        """Delete a chapter unless it is the last one left.

        Deleting the current chapter selects the previous one, or the first.
        """

        if len(self._chapters) <= 1:
            return False
        index = self._find_index(chapter_id)
        if index is None:
            return False

        del self._chapters[index]
        self._contents.pop(chapter_id, None)
        if self.current_chapter_id == chapter_id:
            self.current_chapter_id = self._chapters[max(0, index - 1)].id
        self.save()
        return True

    def reorder_chapters(self, ordered_ids: list[str]) -> bool:
        """Apply a new chapter order when it names every chapter exactly once."""

        by_id = {record.id: record for record in self._chapters}
        if len(ordered_ids) != len(self._chapters) or set(ordered_ids) != set(by_id):
            return False
        self._chapters = [by_id[chapter_id] for chapter_id in ordered_ids]
        self.save()
        return True

    def import_full_book(self, chapters: list[Chapter]) -> None:
        """Replace every chapter with the given records under fresh ids."""

        self._chapters = []
        self._contents = {}
        self.current_chapter_id = None
        for chapter in chapters:
            record = ChapterRecord(id=str(uuid.uuid4()), title=chapter.title)
            self._chapters.append(record)
            self._contents[record.id] = chapter.content
            if self.current_chapter_id is None:
                self.current_chapter_id = record.id
        self.save()

    def chapter_payloads(self) -> list[Chapter]:
        """Return `{title, content}` records in book order."""

        return [
            Chapter(title=record.title, content=self.get_chapter_content(record.id))
            for record in self._chapters
        ]

    def _find_index(self, chapter_id: str | None) -> int | None:
        if chapter_id is None:
            return None
        for index, record in enumerate(self._chapters):
            if record.id == chapter_id:
                return index
        return None

    def _chapter_path(self, chapter_id: str) -> Path:
        return self.chapters_dir / f"{chapter_id}{CHAPTER_FILE_SUFFIX}"

    def _read_chapter_file(self, chapter_id: str) -> str:
        path = self._chapter_path(chapter_id)
        if not path.exists():
            return ""
        return path.read_text(encoding="utf-8")

    def _read_payload(self) -> dict[str, object]:
        try:
            payload = json.loads(self.book_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise BookStoreError(
                detail=f"Book file `{self.book_path}` is not valid JSON: {exc}",
                hint="Restore the file from a backup or re-import the manuscript.",
            ) from exc
        if not isinstance(payload, dict):
            raise BookStoreError(
                detail=f"Book file `{self.book_path}` must contain a JSON object.",
                hint="Re-import the manuscript to rebuild the project.",
            )
        try:
            for item in payload.get("chapters") or []:
                _ = item["id"], item["title"]
        except (KeyError, TypeError) as exc:
            raise BookStoreError(
                detail=f"Book file `{self.book_path}` has a malformed chapter entry.",
                hint="Each chapter needs `id` and `title`.",
            ) from exc
        return payload
