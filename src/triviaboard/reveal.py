"""Three-step reveal of a clue cell: hidden, question, answer."""

from __future__ import annotations

from .models import Board, Clue, Coordinate, RevealState

_NEXT_STATE = {
    RevealState.HIDDEN: RevealState.SHOWING_QUESTION,
    RevealState.SHOWING_QUESTION: RevealState.SHOWING_ANSWER,
    RevealState.SHOWING_ANSWER: RevealState.SHOWING_ANSWER,
}


def display_text(clue: Clue) -> str | None:
    """Return the text currently shown for ``clue``, or None while hidden."""
    if clue.reveal_state is RevealState.SHOWING_QUESTION:
        return clue.question
    if clue.reveal_state is RevealState.SHOWING_ANSWER:
        return clue.answer
    return None


def advance(clue: Clue) -> str:
    """Move ``clue`` one step forward and return the text now showing.

    Once the answer is showing, further calls change nothing.
    """
    clue.reveal_state = _NEXT_STATE[clue.reveal_state]
    if clue.reveal_state is RevealState.SHOWING_QUESTION:
        return clue.question
    return clue.answer


def on_interact(board: Board, category_index: int, clue_index: int) -> str:
    """Apply one interaction to the clue at the given position."""
    return advance(board.clue_at(Coordinate(category_index, clue_index)))
