"""Basic smoke tests for project wiring.

These tests verify import-level wiring and default object creation only.
"""

from pathlib import Path

import plume
from plume.config import PlumeConfig
from plume.io.storage import BookStore


def test_package_exposes_text_entry_points() -> None:
    """Top-level package should re-export the manuscript helpers."""

    assert plume.TypographyEngine().process("") == ""
    assert plume.reassemble(plume.get_chapters("#### A\n\nB")) == "#### A\n\nB"
    assert plume.__version__


def test_config_dataclass_defaults() -> None:
    """Config should keep expected defaults for a French book project."""

    config = PlumeConfig()
    assert config.project_dir == Path("book")
    assert config.output_dir == Path("out")
    assert config.language == "fr"
    assert config.typography is True


def test_book_store_can_be_instantiated(tmp_path: Path) -> None:
    store = BookStore(tmp_path)
    assert store.chapters == ()
