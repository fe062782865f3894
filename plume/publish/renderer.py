"""Markdown-to-HTML rendering for previews and exports.

Responsibilities:
- Normalize chapter text with the typography engine before conversion.
- Convert Markdown with Python-Markdown while escaping raw manuscript HTML.
"""

from __future__ import annotations

from collections.abc import Sequence

import markdown

from ..text.typography import TypographyEngine

DEFAULT_EXTENSIONS = ("fenced_code", "tables", "nl2br")


class MarkdownRenderer:
    """Render chapter Markdown into HTML fragments."""

    def __init__(
        self,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
        engine: TypographyEngine | None = None,
        typography: bool = True,
    ) -> None:
        self.extensions = tuple(extensions)
        self.engine = engine or TypographyEngine()
        self.typography = typography

    def render(self, raw_text: str) -> str:
        """Return the HTML fragment for one chapter body."""

        if not raw_text:
            return ""
        text = self.engine.process(raw_text) if self.typography else raw_text
        return self._converter().convert(text)

    def _converter(self) -> markdown.Markdown:
        converter = markdown.Markdown(extensions=list(self.extensions), output_format="xhtml")
        # Manuscripts are prose; raw HTML is shown as text rather than injected.
        converter.preprocessors.deregister("html_block")
        converter.inlinePatterns.deregister("html")
        return converter
