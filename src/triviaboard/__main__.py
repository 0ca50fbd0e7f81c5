"""Run the trivia board with ``python -m triviaboard [options]``."""

from __future__ import annotations

import sys

from .main import run


def main(argv: list[str] | None = None) -> int:
    """Forward command-line options to the CLI and return its exit status."""
    return run(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
