"""Unit tests for chapter segmentation and reassembly."""

from __future__ import annotations

from plume.io.chapter_splitter import ChapterSplitter, get_chapters
from plume.io.reassembler import ChapterReassembler, reassemble
from plume.models.datatypes import Chapter


def test_chapter_splitter_returns_empty_for_blank_text() -> None:
    splitter = ChapterSplitter()
    assert splitter.split("") == []
    assert splitter.split(" \n\t ") == []


def test_split_two_headings() -> None:
    chapters = get_chapters("#### A\n\ntext1\n\n#### B\n\ntext2")

    assert chapters == [Chapter(title="A", content="text1"), Chapter(title="B", content="text2")]


def test_split_without_heading_falls_back_to_single_chapter() -> None:
    assert get_chapters("  just text \n") == [Chapter(title="Chapitre 1", content="just text")]


def test_split_keeps_pre_heading_text_as_introduction() -> None:
    chapters = get_chapters("intro\n#### A\nbody")

    assert chapters == [
        Chapter(title="Introduction", content="intro"),
        Chapter(title="A", content="body"),
    ]


def test_split_skips_blank_introduction() -> None:
    assert [chapter.title for chapter in get_chapters("\n\n#### A\nbody")] == ["A"]


def test_split_normalizes_line_terminators() -> None:
    chapters = get_chapters("#### A\r\n\r\nun\r\ndeux\r#### B\rtrois")

    assert chapters == [
        Chapter(title="A", content="un\ndeux"),
        Chapter(title="B", content="trois"),
    ]


def test_split_preserves_interior_blank_lines_and_trims_titles() -> None:
    chapters = get_chapters("####   Le départ  \n\n\npremier\n\n\nsecond\n\n")

    assert chapters == [Chapter(title="Le départ", content="premier\n\n\nsecond")]


def test_split_ignores_heading_without_title_and_other_levels() -> None:
    """`#### ` alone, `####x`, and `#####` lines are ordinary content."""

    text = "#### A\n#### \n####x\n##### Sous-titre\nfin"

    assert get_chapters(text) == [
        Chapter(title="A", content="#### \n####x\n##### Sous-titre\nfin"),
    ]


def test_split_consecutive_headings_yield_empty_content() -> None:
    assert get_chapters("#### A\n#### B\ncorps") == [
        Chapter(title="A", content=""),
        Chapter(title="B", content="corps"),
    ]


def test_split_heading_must_start_a_line() -> None:
    assert get_chapters("voir #### A ici") == [
        Chapter(title="Chapitre 1", content="voir #### A ici"),
    ]


def test_reassemble_joins_with_two_blank_lines() -> None:
    chapters = [Chapter(title="A", content="text1"), Chapter(title="B", content="text2")]

    assert reassemble(chapters) == "#### A\n\ntext1\n\n\n#### B\n\ntext2"


def test_reassemble_empty_input_and_blank_content() -> None:
    reassembler = ChapterReassembler()

    assert reassembler.reassemble([]) == ""
    assert reassembler.reassemble(
        [Chapter(title="Vide", content="  \n"), Chapter(title="Plein", content="\n x \n")]
    ) == "#### Vide\n\n\n#### Plein\n\nx"


def test_split_then_reassemble_round_trip() -> None:
    manuscript = "#### Un\n\nPremier.\n\nSuite.\n\n\n#### Deux\n\n\n#### Trois\n\nFin."

    assert reassemble(get_chapters(manuscript)) == manuscript
