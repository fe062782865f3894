"""Filesystem-safe export file names."""

from __future__ import annotations

import re

DEFAULT_BOOK_BASENAME = "Livre_sans_titre"
FALLBACK_BASENAME = "export_livre"

_FORBIDDEN_CHARACTERS_RE = re.compile(r'[\\/:*?"<>|]')
_WHITESPACE_RE = re.compile(r"\s+")


def safe_export_filename(title: str | None, extension: str) -> str:
    """Return `<title>.<extension>` with path-hostile characters removed.

    Accented letters are kept; whitespace runs become underscores.
    """

    base = (title or "").strip() or DEFAULT_BOOK_BASENAME
    cleaned = _FORBIDDEN_CHARACTERS_RE.sub("", base).strip()
    cleaned = _WHITESPACE_RE.sub("_", cleaned)
    return f"{cleaned or FALLBACK_BASENAME}.{extension.lstrip('.')}"
