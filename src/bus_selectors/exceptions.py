"""Custom exceptions for bus-selectors."""

from __future__ import annotations

from typing import Any

__all__ = [
    "InvalidPatternError",
    "MatchError",
    "SelectorError",
]


class SelectorError(Exception):
    """Base exception for all bus-selectors errors."""


class InvalidPatternError(SelectorError):
    """Raised when a selector pattern cannot be compiled.

    Parameters:
        message: Human-readable description of the failure.
        pattern: The offending pattern source.
        position: Index into the pattern where compilation failed, if known.
    """

    def __init__(self, message: str, pattern: Any = None, position: int | None = None) -> None:
        super().__init__(message)
        self.pattern = pattern
        self.position = position


class MatchError(SelectorError):
    """Raised when the regex engine fails while matching a key.

    The engine exception is available as ``__cause__``.
    """

    def __init__(self, message: str, pattern: str | None = None, key: Any = None) -> None:
        super().__init__(message)
        self.pattern = pattern
        self.key = key
