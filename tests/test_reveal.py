import pytest

from triviaboard.models import Board, Category, Clue, RevealState
from triviaboard.reveal import advance, display_text, on_interact

ORDER = [RevealState.HIDDEN, RevealState.SHOWING_QUESTION, RevealState.SHOWING_ANSWER]


def _board() -> Board:
    return Board(
        categories=tuple(
            Category(
                id=cat,
                title=f"T{cat}",
                clues=tuple(Clue(question=f"q{cat}{n}", answer=f"a{cat}{n}") for n in range(3)),
            )
            for cat in range(2)
        )
    )


def test_hidden_question_answer_sequence() -> None:
    clue = Clue(question="Hamlet author", answer="Shakespeare")
    assert display_text(clue) is None

    assert advance(clue) == "Hamlet author"
    assert clue.reveal_state is RevealState.SHOWING_QUESTION

    assert advance(clue) == "Shakespeare"
    assert clue.reveal_state is RevealState.SHOWING_ANSWER

    assert advance(clue) == "Shakespeare"
    assert clue.reveal_state is RevealState.SHOWING_ANSWER


def test_answer_state_is_terminal() -> None:
    clue = Clue(question="q", answer="a", reveal_state=RevealState.SHOWING_ANSWER)
    for _ in range(5):
        assert advance(clue) == "a"
        assert clue.reveal_state is RevealState.SHOWING_ANSWER


def test_state_never_regresses() -> None:
    clue = Clue(question="q", answer="a")
    previous = ORDER.index(clue.reveal_state)
    for _ in range(6):
        advance(clue)
        current = ORDER.index(clue.reveal_state)
        assert current >= previous
        previous = current


def test_on_interact_touches_only_target_clue() -> None:
    board = _board()
    assert on_interact(board, 1, 2) == "q12"
    for category_index, category in enumerate(board.categories):
        for clue_index, clue in enumerate(category.clues):
            expected = RevealState.SHOWING_QUESTION if (category_index, clue_index) == (1, 2) else RevealState.HIDDEN
            assert clue.reveal_state is expected
    assert on_interact(board, 1, 2) == "a12"


@pytest.mark.parametrize("coordinate", [(2, 0), (0, 3), (-1, 0), (0, -1)])
def test_on_interact_out_of_range(coordinate: tuple[int, int]) -> None:
    board = _board()
    with pytest.raises(IndexError):
        on_interact(board, *coordinate)
