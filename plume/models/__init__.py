"""Data model package for Plume."""

from .datatypes import BookMetadata, Chapter, ChapterRecord, CodeRegionExtraction

__all__ = [
    "BookMetadata",
    "Chapter",
    "ChapterRecord",
    "CodeRegionExtraction",
]
