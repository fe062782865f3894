"""Domain exceptions for store, import, export, and CLI diagnostics."""

from __future__ import annotations


class StageError(RuntimeError):
    """Raised when a specific command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class BookStoreError(StageError):
    """Raised when persisted book state cannot be read."""

    def __init__(self, *, detail: str, hint: str | None = None) -> None:
        super().__init__(stage="store", detail=detail, hint=hint)
