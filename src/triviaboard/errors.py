"""Exceptions raised while building or sampling a board."""

from __future__ import annotations

from typing import Any


class TriviaError(Exception):
    """Base class for triviaboard errors."""


class InsufficientDataError(TriviaError, ValueError):
    """A sample asked for more items than the pool holds."""

    def __init__(self, requested: int, available: int) -> None:
        super().__init__(f"Cannot sample {requested} item(s) from a pool of {available}.")
        self.requested = requested
        self.available = available


class BoardBuildError(TriviaError):
    """A board build failed; the current board is left as it was."""


class CategoryIdFetchError(BoardBuildError):
    """The category id pool could not be fetched or was too small."""


class CategoryLoadError(BoardBuildError):
    """One category's title or clues could not be loaded."""

    def __init__(self, category_id: Any, reason: str) -> None:
        super().__init__(f"Could not load category {category_id!r}: {reason}")
        self.category_id = category_id
        self.reason = reason
