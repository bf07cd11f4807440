"""Custom exception types used by the scaffolder."""

from __future__ import annotations


class ScaffoldAborted(RuntimeError):
    """Raised when the user cancels an interactive prompt."""

    def __init__(self, message: str = "aborted by user") -> None:
        super().__init__(message)
