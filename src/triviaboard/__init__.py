"""Trivia board game: random categories, random clues, progressive reveal."""

from __future__ import annotations

import re
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from .config import BoardConfig
from .errors import (
    BoardBuildError,
    CategoryIdFetchError,
    CategoryLoadError,
    InsufficientDataError,
    TriviaError,
)
from .loader import build_board, load_category
from .models import Board, Category, Clue, Coordinate, RevealState
from .reveal import on_interact
from .sampler import sample_clues

__all__ = [
    "Board",
    "BoardBuildError",
    "BoardConfig",
    "Category",
    "CategoryIdFetchError",
    "CategoryLoadError",
    "Clue",
    "Coordinate",
    "InsufficientDataError",
    "RevealState",
    "TriviaError",
    "__version__",
    "build_board",
    "load_category",
    "on_interact",
    "sample_clues",
]


def _version_from_pyproject() -> str | None:
    """Read [project].version from a checkout's pyproject.toml, if there is one."""
    for base in Path(__file__).resolve().parents:
        pyproject = base / "pyproject.toml"
        if not pyproject.is_file():
            continue
        in_project = False
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            stripped = line.strip()
            if stripped.startswith("[") and stripped.endswith("]"):
                in_project = stripped == "[project]"
            elif in_project:
                match = re.match(r'^version\s*=\s*"([^"]+)"$', stripped)
                if match:
                    return match.group(1)
        return None
    return None


try:
    __version__ = _version_from_pyproject() or version("triviaboard")
except PackageNotFoundError:
    __version__ = "0+unknown"
