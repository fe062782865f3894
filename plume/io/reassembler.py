"""Chapter reassembly into one manuscript text."""

from __future__ import annotations

from collections.abc import Iterable

from ..models.datatypes import Chapter

HEADING_PREFIX = "#### "
CHAPTER_SEPARATOR = "\n\n\n"


class ChapterReassembler:
    """Join chapter records back into a single Markdown manuscript."""

    def reassemble(self, chapters: Iterable[Chapter]) -> str:
        """Render each chapter as a `####` heading plus its trimmed content.

        Chapters with blank content render as the heading line alone. Blocks are
        separated by two blank lines.
        """

        blocks: list[str] = []
        for chapter in chapters:
            heading = f"{HEADING_PREFIX}{chapter.title}"
            content = chapter.content.strip() if chapter.content else ""
            blocks.append(f"{heading}\n\n{content}" if content else heading)
        return CHAPTER_SEPARATOR.join(blocks)


def reassemble(chapters: Iterable[Chapter]) -> str:
    """Reassemble chapters with the default reassembler."""

    return ChapterReassembler().reassemble(chapters)
