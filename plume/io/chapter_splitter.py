"""Chapter segmentation of a full manuscript.

Responsibilities:
- Split manuscript text into ordered `Chapter` records on `####` headings.
- Keep text written before the first heading as an introduction chapter.
"""

from __future__ import annotations

import re

from ..models.datatypes import Chapter

FALLBACK_CHAPTER_TITLE = "Chapitre 1"
INTRODUCTION_TITLE = "Introduction"


class ChapterSplitter:
    """Split manuscript text into chapter records."""

    _HEADING_RE = re.compile(r"(?:^|\n)####[ \t]+(?P<title>[^\n]*\S)[ \t]*")

    def split(self, text: str) -> list[Chapter]:
        """Split text into chapters.

        A heading is `####`, at least one space, then a non-blank title, at the
        start of a line. Content keeps interior blank lines; only newlines at
        its edges are dropped.
        """

        if not text:
            return []

        normalized = text.replace("\r\n", "\n").replace("\r", "\n")
        matches = list(self._HEADING_RE.finditer(normalized))
        if not matches:
            stripped = normalized.strip()
            if not stripped:
                return []
            return [Chapter(title=FALLBACK_CHAPTER_TITLE, content=stripped)]

        chapters: list[Chapter] = []

        leading_text = normalized[: matches[0].start()].strip()
        if leading_text:
            chapters.append(Chapter(title=INTRODUCTION_TITLE, content=leading_text))

        for idx, match in enumerate(matches):
            content_start = match.end()
            content_end = matches[idx + 1].start() if idx + 1 < len(matches) else len(normalized)
            content = normalized[content_start:content_end].strip("\n")
            chapters.append(Chapter(title=match.group("title").strip(), content=content))

        return chapters


def get_chapters(text: str) -> list[Chapter]:
    """Split a manuscript with the default splitter."""

    return ChapterSplitter().split(text)
