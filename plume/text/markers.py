"""Quote/emphasis marker ordering.

Guillemets always sit outside adjacent emphasis markers: `**«` becomes `«**`
and `»**` becomes `**»`.
"""

from __future__ import annotations

OPENING_GUILLEMET = "«"
CLOSING_GUILLEMET = "»"

# Widest first, since `*` is a substring of `**` and `***`.
EMPHASIS_MARKERS = ("***", "**", "*")


def reorder_markers(line: str) -> str:
    """Move guillemets outside the emphasis markers they touch.

    Passes repeat until the line is stable, so chains such as `*««` or
    `*«*«` end with every guillemet outside every marker.
    """

    previous = None
    while line != previous:
        previous = line
        for marker in EMPHASIS_MARKERS:
            line = line.replace(f"{marker}{OPENING_GUILLEMET}", f"{OPENING_GUILLEMET}{marker}")
        for marker in EMPHASIS_MARKERS:
            line = line.replace(f"{CLOSING_GUILLEMET}{marker}", f"{marker}{CLOSING_GUILLEMET}")
    return line
