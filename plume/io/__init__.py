"""Input/output components for Plume.

This package contains chapter segmentation and reassembly, manuscript import,
and the file-backed book store.
"""

from .chapter_splitter import ChapterSplitter, get_chapters
from .importer import import_manuscript, read_manuscript
from .reassembler import ChapterReassembler, reassemble
from .storage import BookStore

__all__ = [
    "BookStore",
    "ChapterReassembler",
    "ChapterSplitter",
    "get_chapters",
    "import_manuscript",
    "read_manuscript",
    "reassemble",
]
