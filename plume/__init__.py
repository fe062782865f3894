"""Top-level package for Plume.

Plume normalizes French manuscript typography, splits manuscripts into
chapters and back, and exports books as Markdown, HTML, or EPUB. The main
text entry point is `TypographyEngine`.
"""

from .io.chapter_splitter import get_chapters
from .io.reassembler import reassemble
from .text.typography import TypographyEngine

__all__ = ["TypographyEngine", "get_chapters", "reassemble", "__version__"]

__version__ = "0.1.0"
