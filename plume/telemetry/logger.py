"""Structured command logging.

Responsibilities:
- Emit concise, deterministic phase-level logs for CLI commands through `loguru`.
- Keep context values shell-safe and ordered so log lines are diffable.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    if not context:
        return ""
    return " " + " ".join(
        f"{key}={_sanitize_context_value(context[key])}" for key in sorted(context)
    )


class RunLogger:
    """Emit deterministic phase logs for CLI-observable activity."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Route loguru output to `sink` (stderr by default) with a bare message format."""

        self._sink = sink or sys.stderr
        logger.remove()
        logger.add(self._sink, format="{message}", level=level, colorize=False)

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        line = f"[phase] level={level} stage={stage} event={event}{_format_context(context)}"
        logger.log(level, line)

    def log_stage_start(self, stage: str, **context: object) -> None:
        """Emit a stage-start event."""

        self._emit("INFO", "start", stage, **context)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        """Emit a stage-complete event."""

        self._emit("INFO", "complete", stage, **context)

    def log_stage_warning(self, stage: str, reason: str) -> None:
        """Emit a non-fatal stage event, such as a refused store operation."""

        self._emit("WARNING", "warning", stage, reason=reason)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage-failure event without payload details."""

        self._emit("ERROR", "failure", stage, error_type=error_type)
