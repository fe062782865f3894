"""Text normalization components.

This package protects code regions and applies the typographic rules used
before Markdown rendering.
"""

from .code_regions import extract_code_regions, is_placeholder_line, restore_code_regions
from .markers import reorder_markers
from .typography import DialogueState, TypographyEngine

__all__ = [
    "DialogueState",
    "TypographyEngine",
    "extract_code_regions",
    "is_placeholder_line",
    "reorder_markers",
    "restore_code_regions",
]
