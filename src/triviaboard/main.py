"""CLI entrypoint for the terminal trivia board."""

from __future__ import annotations

import argparse
import asyncio
import logging
import random
from collections.abc import Callable

from . import __version__
from .client import TriviaClient
from .config import BoardConfig
from .errors import BoardBuildError
from .models import Board, Clue, RevealState
from .service import GameService

InputFn = Callable[[str], str]
PrintFn = Callable[[str], None]
MENU_QUIT_COMMANDS = {"q", ":q", ":quit"}
NEW_GAME_COMMANDS = {"n", "r", "restart"}
MAX_CELL_WIDTH = 18
CELL_MARKERS = {
    RevealState.HIDDEN: "?",
    RevealState.SHOWING_QUESTION: "Q",
    RevealState.SHOWING_ANSWER: "A",
}


def _service(config: BoardConfig, seed: int | None = None) -> GameService:
    """Create the game service with an HTTP client for ``config``."""
    client = TriviaClient(base_url=config.base_url, timeout=config.timeout)
    rng = random.Random(seed) if seed is not None else None
    return GameService(client, config=config, rng=rng)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="triviaboard", description="Trivia board game in the terminal")
    parser.add_argument("command", nargs="?", default="play", choices=["play"])
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    defaults = BoardConfig()
    parser.add_argument("--base-url", default=defaults.base_url, help="trivia data service root URL")
    parser.add_argument("--categories", type=int, default=defaults.width, help="categories per board")
    parser.add_argument("--clues", type=int, default=defaults.clues_per_category, help="clues per category")
    parser.add_argument(
        "--pool-size", type=int, default=defaults.id_pool_size, help="category ids to sample the board from"
    )
    parser.add_argument("--timeout", type=float, default=defaults.timeout, help="HTTP timeout in seconds")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible boards")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    return parser


def run(argv: list[str] | None = None) -> int:
    """Run the CLI application."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        config = BoardConfig(
            width=args.categories,
            clues_per_category=args.clues,
            id_pool_size=args.pool_size,
            base_url=args.base_url,
            timeout=args.timeout,
        )
    except ValueError as exc:
        parser.error(str(exc))
    return play_shell(config, seed=args.seed)


def play_shell(
    config: BoardConfig | None = None,
    input_fn: InputFn = input,
    print_fn: PrintFn = print,
    *,
    seed: int | None = None,
) -> int:
    """Run the interactive board until the player quits."""
    service = _service(config or BoardConfig(), seed)
    try:
        _new_game(service, print_fn)
        while True:
            board = service.board
            if board is not None:
                print_fn("")
                for line in render_board(board):
                    print_fn(line)
                print_fn("Type '<category> <clue>' to reveal a cell.")
            print_fn("n) New game")
            print_fn("q) Quit")
            choice = input_fn("Choose: ").strip().lower()

            if choice in MENU_QUIT_COMMANDS:
                return 0
            if choice in NEW_GAME_COMMANDS:
                _new_game(service, print_fn)
                continue

            coordinate = _parse_coordinate(choice)
            if board is None or coordinate is None:
                print_fn("Invalid choice.")
                continue
            try:
                text = service.interact(*coordinate)
            except IndexError:
                print_fn("Invalid choice.")
                continue
            title = board.categories[coordinate[0]].title
            print_fn(f"\n[{title} #{coordinate[1] + 1}] {text}")
    finally:
        service.close()


def _new_game(service: GameService, print_fn: PrintFn) -> bool:
    """Build a new board, reporting failure without touching the old one."""
    print_fn("Loading board...")
    try:
        asyncio.run(service.restart())
    except BoardBuildError as exc:
        print_fn(f"Could not load a board: {exc}")
        if service.board is not None:
            print_fn("Keeping the previous board.")
        return False
    return True


def _parse_coordinate(choice: str) -> tuple[int, int] | None:
    """Parse 1-based ``"<category> <clue>"`` input into 0-based indexes."""
    parts = choice.replace(",", " ").split()
    if len(parts) != 2 or not all(part.isdecimal() for part in parts):
        return None
    category_number, clue_number = (int(part) for part in parts)
    if category_number < 1 or clue_number < 1:
        return None
    return (category_number - 1, clue_number - 1)


def _cell(text: str, width: int) -> str:
    if len(text) > width:
        text = text[: width - 1] + "~"
    return f"{text:<{width}}"


def _marker(clue: Clue) -> str:
    return CELL_MARKERS[clue.reveal_state]


def render_board(board: Board) -> list[str]:
    """Render the board as text: a title row, then one row per clue index.

    Cells show ``?`` while hidden, ``Q`` once the question is showing and ``A``
    once the answer is showing.
    """
    headers = [f"{idx}) {category.title}" for idx, category in enumerate(board.categories, start=1)]
    widths = [min(MAX_CELL_WIDTH, max(3, len(header))) for header in headers]
    row_width = max(1, len(str(board.depth)))

    header = " | ".join([" " * row_width] + [_cell(text, width) for text, width in zip(headers, widths)])
    lines = [header.rstrip(), "-" * len(header)]
    for clue_index in range(board.depth):
        cells = [
            _cell(_marker(category.clues[clue_index]), width)
            for category, width in zip(board.categories, widths)
        ]
        lines.append(" | ".join([f"{clue_index + 1:>{row_width}}"] + cells).rstrip())
    return lines


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
