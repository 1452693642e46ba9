from __future__ import annotations


class LayoutConfigError(ValueError):
    """Raised when static layout data or board options are malformed."""


class LayoutStateError(RuntimeError):
    """Raised when a generation step is driven out of order or twice."""


class LayoutGenerationError(RuntimeError):
    """Raised when a bounded re-shuffle loop runs out of attempts."""

    def __init__(self, message: str, *, attempts: int) -> None:
        super().__init__(message)
        self.attempts = attempts
