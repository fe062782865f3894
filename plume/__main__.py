"""Module entrypoint for running Plume as ``python -m plume``."""

from __future__ import annotations

from plume.cli import main


if __name__ == "__main__":
    main()
