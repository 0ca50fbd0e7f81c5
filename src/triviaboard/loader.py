"""Load categories from the data service and assemble boards."""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Any, Protocol

import requests

from .config import BoardConfig
from .errors import CategoryIdFetchError, CategoryLoadError, InsufficientDataError
from .models import Board, Category
from .sampler import sample_clues, sample_ids

logger = logging.getLogger(__name__)


class CategorySource(Protocol):
    """What the loader needs from a data service client."""

    def get_categories(self, count: int) -> list[dict[str, Any]]: ...

    def get_category(self, category_id: Any) -> dict[str, Any]: ...


def _category_from_dict(
    category_id: Any, raw: dict[str, Any], config: BoardConfig, rng: random.Random | None
) -> Category:
    """Validate one category payload and sample its clues."""
    payload_id = raw.get("id")
    if payload_id is not None and str(payload_id) != str(category_id):
        raise ValueError(f"response is for category {payload_id!r}")

    title = str(raw.get("title") or "").strip()
    if not title:
        raise ValueError("category has no title")

    pool = raw.get("clues")
    if not isinstance(pool, list):
        raise ValueError("category has no clue list")

    clues = sample_clues(pool, config.clues_per_category, rng)
    return Category(id=category_id, title=title, clues=tuple(clues))


def _category_ids(summaries: list[dict[str, Any]]) -> list[str | int]:
    """Pull ids out of category summaries; ids must be strings or integers."""
    ids: list[str | int] = []
    for item in summaries:
        if not isinstance(item, dict) or item.get("id") is None:
            continue
        category_id = item["id"]
        if isinstance(category_id, bool) or not isinstance(category_id, (str, int)):
            raise ValueError(f"category id {category_id!r} is not a string or integer")
        ids.append(category_id)
    return ids


async def load_category(
    client: CategorySource,
    category_id: Any,
    config: BoardConfig | None = None,
    rng: random.Random | None = None,
) -> Category:
    """Fetch one category and draw its clues.

    Any transport error, malformed payload or undersized clue pool is raised
    as ``CategoryLoadError`` for ``category_id``.
    """
    config = config or BoardConfig()
    try:
        raw = await asyncio.to_thread(client.get_category, category_id)
        return _category_from_dict(category_id, raw, config, rng)
    except InsufficientDataError as exc:
        logger.warning("Category %r has %d clue(s), need %d", category_id, exc.available, exc.requested)
        raise CategoryLoadError(category_id, str(exc)) from exc
    except (requests.RequestException, ValueError) as exc:
        logger.warning("Error fetching category %r: %s", category_id, exc)
        raise CategoryLoadError(category_id, str(exc)) from exc


async def fetch_category_ids(
    client: CategorySource,
    config: BoardConfig | None = None,
    rng: random.Random | None = None,
) -> list[Any]:
    """Fetch the category id pool and draw ``config.width`` distinct ids."""
    config = config or BoardConfig()
    try:
        summaries = await asyncio.to_thread(client.get_categories, config.id_pool_size)
        return sample_ids(_category_ids(summaries), config.width, rng)
    except InsufficientDataError as exc:
        logger.warning("Category pool has %d distinct id(s), need %d", exc.available, exc.requested)
        raise CategoryIdFetchError(f"Not enough categories to fill the board: {exc}") from exc
    except (requests.RequestException, ValueError) as exc:
        logger.warning("Error fetching category ids: %s", exc)
        raise CategoryIdFetchError(f"Could not fetch category ids: {exc}") from exc


async def build_board(
    client: CategorySource,
    config: BoardConfig | None = None,
    rng: random.Random | None = None,
) -> Board:
    """Build a fresh board: draw category ids, then load every column concurrently.

    The first failing category aborts the build. Columns keep the order the
    ids were drawn in.
    """
    config = config or BoardConfig()
    category_ids = await fetch_category_ids(client, config, rng)
    logger.debug("Loading categories %s", category_ids)
    # One child generator per column, seeded in draw order, so a seeded build
    # does not depend on which response arrives first.
    source = rng or random.Random()
    column_rngs = [random.Random(source.getrandbits(64)) for _ in category_ids]
    categories = await asyncio.gather(
        *(
            load_category(client, category_id, config, column_rng)
            for category_id, column_rng in zip(category_ids, column_rngs)
        )
    )
    board = Board(categories=tuple(categories))
    logger.info("Built board: %s", ", ".join(category.title for category in board.categories))
    return board
