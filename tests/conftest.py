from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest
import requests

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def make_category(category_id: int, clue_count: int = 5) -> dict[str, Any]:
    """Build a service-shaped category payload with numbered clues."""
    return {
        "id": category_id,
        "title": f"Category {category_id}",
        "clues_count": clue_count,
        "clues": [
            {"id": category_id * 100 + n, "question": f"Q{category_id}.{n}", "answer": f"A{category_id}.{n}"}
            for n in range(clue_count)
        ],
    }


class FakeClient:
    """In-memory stand-in for TriviaClient."""

    def __init__(self, category_count: int = 20, clue_count: int = 5) -> None:
        self.categories: dict[Any, dict[str, Any]] = {
            category_id: make_category(category_id, clue_count) for category_id in range(1, category_count + 1)
        }
        self.failing_ids: set[Any] = set()
        self.fail_categories = False
        self.category_calls: list[Any] = []
        self.categories_calls: list[int] = []
        self.closed = False

    def get_categories(self, count: int) -> list[dict[str, Any]]:
        self.categories_calls.append(count)
        if self.fail_categories:
            raise requests.ConnectionError("service unreachable")
        items = [{"id": raw["id"], "title": raw["title"]} for raw in self.categories.values()]
        return items[:count]

    def get_category(self, category_id: Any) -> dict[str, Any]:
        self.category_calls.append(category_id)
        if category_id in self.failing_ids:
            raise requests.HTTPError(f"404 for category {category_id}")
        return self.categories[category_id]

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()
