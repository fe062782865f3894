"""Unit tests for guillemet/emphasis marker reordering."""

from __future__ import annotations

import pytest

from plume.text.markers import EMPHASIS_MARKERS, reorder_markers


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("***«a»***", "«***a***»"),
        ("**«a»**", "«**a**»"),
        ("*«a»*", "«*a*»"),
        ("dit **«oui»** puis", "dit «**oui**» puis"),
        ("«déjà»", "«déjà»"),
    ],
)
def test_reorder_moves_guillemets_outside(line: str, expected: str) -> None:
    """Guillemets adjacent to emphasis should end up on the outside."""

    assert reorder_markers(line) == expected


def test_reorder_is_idempotent_and_leaves_no_inner_guillemet() -> None:
    """A second pass is a no-op and no marker stays inside a guillemet."""

    line = "***«a»*** et **«b»** et *«c»*"
    once = reorder_markers(line)

    assert reorder_markers(once) == once
    for marker in EMPHASIS_MARKERS:
        assert f"{marker}«" not in once
        assert f"»{marker}" not in once


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("*««", "««*"),
        ("»»*", "*»»"),
        ("*«*«", "««**"),
        ("**«*«x»*»**", "««***x***»»"),
    ],
)
def test_reorder_moves_guillemet_chains_past_every_marker(line: str, expected: str) -> None:
    """Runs of guillemets and markers should settle in one call."""

    assert reorder_markers(line) == expected
    assert reorder_markers(expected) == expected
