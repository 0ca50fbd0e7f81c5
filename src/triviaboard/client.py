"""HTTP access to the remote trivia data service."""

from __future__ import annotations

import logging
from typing import Any, cast

import requests

from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


class TriviaClient:
    """Thin wrapper over the ``/categories`` and ``/category`` endpoints."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._owns_session = session is None
        self._session = session if session is not None else requests.Session()

    def __enter__(self) -> TriviaClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self._session.close()

    def _get(self, path: str, params: dict[str, Any]) -> object:
        url = f"{self.base_url}/{path}"
        logger.debug("GET %s params=%s", url, params)
        response = self._session.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def get_categories(self, count: int) -> list[dict[str, Any]]:
        """Return up to ``count`` category summaries (``{id, title}``)."""
        payload = self._get("categories", {"count": count})
        if isinstance(payload, dict):
            payload = payload.get("categories")
        if not isinstance(payload, list):
            raise ValueError("Categories response is not a list.")
        return cast(list[dict[str, Any]], payload)

    def get_category(self, category_id: Any) -> dict[str, Any]:
        """Return one category with its full clue pool."""
        payload = self._get("category", {"id": category_id})
        if not isinstance(payload, dict):
            raise ValueError(f"Category {category_id!r} response is not an object.")
        return cast(dict[str, Any], payload)
