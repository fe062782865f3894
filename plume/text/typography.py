"""Typographic normalization for French manuscripts.

Responsibilities:
- Tighten whitespace inside `*`, `**`, and `***` emphasis pairs.
- Turn straight quotes into guillemets with a dialogue state that spans the
  whole manuscript, keeping internal apostrophes such as `l'arbre`.
- Keep guillemets outside emphasis markers.
- Never touch fenced code blocks or inline code spans.

Key types:
- `TypographyEngine`: line-oriented normalizer entry point.
- `DialogueState`: open/closed flag owned by one `process` call.
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from .code_regions import extract_code_regions, is_placeholder_line, restore_code_regions
from .markers import CLOSING_GUILLEMET, OPENING_GUILLEMET, reorder_markers

_ALPHANUMERIC_RE = re.compile(r"[A-Za-zÀ-ÖØ-öø-ÿ0-9]")
_STRAIGHT_QUOTES = frozenset({"'", '"'})
_BULLET_RE = re.compile(r"^(\s*)\*(\s+)")
_BULLET_MASK = "__LIST__"


def _emphasis_patterns(marker: str) -> tuple[re.Pattern[str], ...]:
    """Build the both-sides, leading-only, and trailing-only spacing patterns."""

    escaped = re.escape(marker)
    return (
        re.compile(rf"({escaped})\s+(.*?)\s+({escaped})"),
        re.compile(rf"({escaped})\s+(.*?)({escaped})"),
        re.compile(rf"({escaped})(.*?)\s+({escaped})"),
    )


_STRONG_ALT_PATTERNS = _emphasis_patterns("***")
_STRONG_PATTERNS = _emphasis_patterns("**")
_EMPHASIS_PATTERNS = _emphasis_patterns("*")


def is_alphanumeric(character: str) -> bool:
    """Return whether one character is a Latin letter (French accents included) or digit."""

    return _ALPHANUMERIC_RE.fullmatch(character) is not None


@dataclass(slots=True)
class DialogueState:
    """Whether a dialogue quotation is currently open."""

    is_open: bool = False


class TypographyEngine:
    """Apply French typographic rules to Markdown text without altering code."""

    def process(self, text: str) -> str:
        """Normalize a full manuscript or chapter.

        The dialogue state is created here and carried from line to line, so a
        quotation left open on one paragraph is closed by the next quote mark,
        wherever it appears.
        """

        if not text:
            return text

        extraction = extract_code_regions(text)
        lines = extraction.text.split("\n")
        state = DialogueState()

        for index, line in enumerate(lines):
            if is_placeholder_line(line):
                continue
            lines[index] = self.process_line(line, state)

        return restore_code_regions("\n".join(lines), extraction.fragments)

    def process_line(self, line: str, state: DialogueState) -> str:
        """Run emphasis cleanup, quote classification, and marker reordering on one line."""

        line = self.fix_emphasis_spaces(line)
        line = self.apply_smart_quotes(line, state)
        return reorder_markers(line)

    def fix_emphasis_spaces(self, line: str) -> str:
        """Remove whitespace just inside emphasis marker pairs.

        A leading bullet `*` is masked during the single-marker pass so it is
        not mistaken for an emphasis opener.
        """

        line = self._collapse(line, _STRONG_ALT_PATTERNS)
        line = self._collapse(line, _STRONG_PATTERNS)

        is_bullet = _BULLET_RE.match(line) is not None
        if is_bullet:
            line = _BULLET_RE.sub(rf"\g<1>{_BULLET_MASK}\g<2>", line, count=1)

        line = self._collapse(line, _EMPHASIS_PATTERNS)

        if is_bullet:
            line = line.replace(_BULLET_MASK, "*", 1)
        return line

    def apply_smart_quotes(self, line: str, state: DialogueState) -> str:
        """Classify straight quotes as apostrophes or dialogue boundaries.

        Single and double straight quotes follow the same rules.
        """

        characters: list[str] = []
        last = len(line) - 1
        for position, character in enumerate(line):
            if character == OPENING_GUILLEMET:
                state.is_open = True
                characters.append(character)
            elif character == CLOSING_GUILLEMET:
                state.is_open = False
                characters.append(character)
            elif character in _STRAIGHT_QUOTES:
                previous = line[position - 1] if position > 0 else " "
                following = line[position + 1] if position < last else " "
                if is_alphanumeric(previous) and is_alphanumeric(following):
                    characters.append(character)
                elif state.is_open:
                    characters.append(CLOSING_GUILLEMET)
                    state.is_open = False
                else:
                    characters.append(OPENING_GUILLEMET)
                    state.is_open = True
            else:
                characters.append(character)
        return "".join(characters)

    @staticmethod
    def _collapse(line: str, patterns: tuple[re.Pattern[str], ...]) -> str:
        for pattern in patterns:
            line = pattern.sub(r"\1\2\3", line)
        return line
