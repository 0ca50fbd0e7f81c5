"""Random draws of clues and category ids."""

from __future__ import annotations

import random
from collections.abc import Hashable, Mapping, Sequence
from typing import Any, TypeVar

from .errors import InsufficientDataError
from .models import Clue, RevealState

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def _draw(pool: Sequence[T], count: int, rng: random.Random | None) -> list[T]:
    """Draw ``count`` distinct positions from ``pool`` without replacement."""
    if count < 0:
        raise ValueError("Sample count must not be negative.")
    if len(pool) < count:
        raise InsufficientDataError(requested=count, available=len(pool))
    return (rng or random).sample(list(pool), count)


def _text(raw: Mapping[str, Any], key: str) -> str:
    value = raw.get(key)
    text = "" if value is None else str(value).strip()
    if not text:
        raise ValueError(f"Clue has no {key} text.")
    return text


def clue_from_dict(raw: Mapping[str, Any]) -> Clue:
    """Build a hidden clue from one raw service record.

    Answers are sometimes numbers in the source data, so both fields are
    coerced to stripped strings. Blank or missing text raises ``ValueError``.
    """
    if not isinstance(raw, Mapping):
        raise ValueError(f"Clue record must be an object, got {type(raw).__name__}.")
    return Clue(question=_text(raw, "question"), answer=_text(raw, "answer"), reveal_state=RevealState.HIDDEN)


def sample_clues(
    pool: Sequence[Mapping[str, Any]], count: int, rng: random.Random | None = None
) -> list[Clue]:
    """Pick ``count`` raw clues at random and normalize them to hidden clues.

    The pool itself is never modified. Raises ``InsufficientDataError`` when the
    pool is smaller than ``count``.
    """
    return [clue_from_dict(raw) for raw in _draw(pool, count, rng)]


def sample_ids(pool: Sequence[H], count: int, rng: random.Random | None = None) -> list[H]:
    """Pick ``count`` distinct ids; repeated ids in the pool count once."""
    unique = list(dict.fromkeys(pool))
    return _draw(unique, count, rng)
