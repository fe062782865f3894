"""Rendering and export components.

This package turns stored chapters into HTML previews and Markdown, HTML, and
EPUB export files.
"""

from .epub_generator import EpubGenerator, export_epub
from .exporters import build_html_document, export_html, export_markdown
from .filenames import safe_export_filename
from .renderer import MarkdownRenderer

__all__ = [
    "EpubGenerator",
    "MarkdownRenderer",
    "build_html_document",
    "export_epub",
    "export_html",
    "export_markdown",
    "safe_export_filename",
]
