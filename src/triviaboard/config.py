"""Board size and data service settings."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BASE_URL = "https://rithm-jeopardy.herokuapp.com/api"
DEFAULT_WIDTH = 6
DEFAULT_CLUES_PER_CATEGORY = 5
DEFAULT_ID_POOL_SIZE = 100
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class BoardConfig:
    """Tunables for one board build."""

    width: int = DEFAULT_WIDTH
    clues_per_category: int = DEFAULT_CLUES_PER_CATEGORY
    id_pool_size: int = DEFAULT_ID_POOL_SIZE
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError("Board width must be at least 1.")
        if self.clues_per_category < 1:
            raise ValueError("Clues per category must be at least 1.")
        if self.id_pool_size < self.width:
            raise ValueError(
                f"Category id pool size {self.id_pool_size} is smaller than board width {self.width}."
            )
        if not self.base_url.strip():
            raise ValueError("Base URL is required.")
        if self.timeout <= 0:
            raise ValueError("Timeout must be positive.")
