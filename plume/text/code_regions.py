"""Protected code-region extraction and restoration.

Responsibilities:
- Replace fenced code blocks and inline code spans with indexed placeholders.
- Restore the verbatim fragments by index once the surrounding text is rewritten.
"""

from __future__ import annotations

import re

from ..models.datatypes import CodeRegionExtraction

PLACEHOLDER_TEMPLATE = "__CODE_BLOCK_{index}__"

# A run of backticks closes only on a run of exactly the same length;
# an unterminated run swallows the rest of the text.
_CODE_REGION_RE = re.compile(
    r"(?P<fence>`+)(?:.*?(?<!`)(?P=fence)(?!`)|.*\Z)",
    re.DOTALL,
)
_PLACEHOLDER_RE = re.compile(r"__CODE_BLOCK_(\d+)__")
_PLACEHOLDER_LINE_RE = re.compile(r"__CODE_BLOCK_\d+__")


def extract_code_regions(text: str) -> CodeRegionExtraction:
    """Swap every code region for a `__CODE_BLOCK_<n>__` token."""

    fragments: list[str] = []

    def _substitute(match: re.Match[str]) -> str:
        fragments.append(match.group(0))
        return PLACEHOLDER_TEMPLATE.format(index=len(fragments) - 1)

    substituted = _CODE_REGION_RE.sub(_substitute, text)
    return CodeRegionExtraction(text=substituted, fragments=tuple(fragments))


def restore_code_regions(text: str, fragments: tuple[str, ...] | list[str]) -> str:
    """Put the extracted fragments back in place of their tokens.

    Tokens pointing past the fragment list are literal manuscript text and are
    left as they are.
    """

    def _lookup(match: re.Match[str]) -> str:
        index = int(match.group(1))
        if index < len(fragments):
            return fragments[index]
        return match.group(0)

    return _PLACEHOLDER_RE.sub(_lookup, text)


def is_placeholder_line(line: str) -> bool:
    """Return whether a line holds nothing but one placeholder token."""

    return _PLACEHOLDER_LINE_RE.fullmatch(line.strip()) is not None
