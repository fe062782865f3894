"""Core datatypes shared across Plume modules.

Responsibilities:
- Represent the transient records exchanged by segmentation and reassembly.
- Represent the persisted chapter and metadata records owned by the book store.

Key types:
- `Chapter`, `ChapterRecord`, `BookMetadata`, and `CodeRegionExtraction`.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Chapter:
    """A titled chapter produced by segmentation and consumed by reassembly.

    Attributes:
        title: Chapter title without the heading marker.
        content: Chapter body text.
    """

    title: str
    content: str


@dataclass(frozen=True, slots=True)
class ChapterRecord:
    """A persisted chapter entry; content is stored separately by id."""

    id: str
    title: str


@dataclass(slots=True)
class BookMetadata:
    """Book-level metadata used by exporters.

    Attributes:
        title: Book title, blank when unset.
        author: Author name, blank when unset.
        language: BCP 47 language code, defaulting to French (`fr`).
    """

    title: str = ""
    author: str = ""
    language: str = "fr"

    def as_payload(self) -> dict[str, str]:
        """Return a JSON-serializable mapping."""

        return {"title": self.title, "author": self.author, "language": self.language}


@dataclass(frozen=True, slots=True)
class CodeRegionExtraction:
    """Placeholder-substituted text plus the verbatim protected fragments.

    Attributes:
        text: Text with every code region replaced by `__CODE_BLOCK_<n>__`.
        fragments: Original fragments, addressed by the zero-based `<n>`.
    """

    text: str
    fragments: tuple[str, ...] = field(default_factory=tuple)
