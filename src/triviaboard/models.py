"""Board, category and clue records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple


class RevealState(Enum):
    """How much of a clue is visible on the board."""

    HIDDEN = "hidden"
    SHOWING_QUESTION = "question"
    SHOWING_ANSWER = "answer"


@dataclass
class Clue:
    """One question/answer pair.

    ``reveal_state`` is the only mutable field; it is advanced by
    :func:`triviaboard.reveal.advance`.
    """

    question: str
    answer: str
    reveal_state: RevealState = field(default=RevealState.HIDDEN)


@dataclass(frozen=True)
class Category:
    """Titled column of clues."""

    id: Any
    title: str
    clues: tuple[Clue, ...]


class Coordinate(NamedTuple):
    """Board position of one clue: column, then row."""

    category_index: int
    clue_index: int


@dataclass(frozen=True)
class Board:
    """Full game state for one play session."""

    categories: tuple[Category, ...]

    def __post_init__(self) -> None:
        """Reject boards that are empty, ragged or hold a category twice."""
        if not self.categories:
            raise ValueError("Board has no categories.")
        depth = len(self.categories[0].clues)
        if depth == 0:
            raise ValueError(f"Category {self.categories[0].id!r} has no clues.")
        seen: set[Any] = set()
        for category in self.categories:
            if len(category.clues) != depth:
                raise ValueError(
                    f"Category {category.id!r} has {len(category.clues)} clue(s); every category needs {depth}."
                )
            if category.id in seen:
                raise ValueError(f"Duplicate category id: {category.id!r}")
            seen.add(category.id)

    @property
    def width(self) -> int:
        """Number of categories (columns)."""
        return len(self.categories)

    @property
    def depth(self) -> int:
        """Number of clues per category (rows)."""
        return len(self.categories[0].clues)

    def category_ids(self) -> list[Any]:
        return [category.id for category in self.categories]

    def clue_at(self, coordinate: Coordinate) -> Clue:
        """Look up a clue by position; negative indexes are rejected."""
        category_index, clue_index = coordinate
        if not 0 <= category_index < self.width:
            raise IndexError(f"Category index {category_index} is outside 0..{self.width - 1}.")
        clues = self.categories[category_index].clues
        if not 0 <= clue_index < len(clues):
            raise IndexError(f"Clue index {clue_index} is outside 0..{len(clues) - 1}.")
        return clues[clue_index]
