"""In-Memory Post Repository — dict-backed stand-in for the DynamoDB table.

Invariants:
    - Same observable behaviour as DynamoPostRepository: update upserts,
      delete of a missing id is silent, get of a missing id returns None
    - Callers never receive references to stored dicts (copies in and out)

Design Decisions:
    - Used by tests and by STORAGE_BACKEND=memory for local runs without AWS
    - scan() returns insertion order; DynamoDB promises no order at all
"""

import copy
from typing import Any, Iterable

from postboard.core.domain_types import PostId


class InMemoryPostRepository:
    """Process-local post table."""

    def __init__(self, items: Iterable[dict] | None = None):
        self._items: dict[int, dict] = {}
        for item in items or ():
            self.put(item)

    def scan(self) -> list[dict]:
        return [copy.deepcopy(item) for item in self._items.values()]

    def get(self, post_id: PostId | float) -> dict | None:
        item = self._items.get(post_id)
        return copy.deepcopy(item) if item is not None else None

    def put(self, item: dict) -> None:
        self._items[item["id"]] = copy.deepcopy(item)

    def update(self, post_id: PostId | float, fields: dict[str, Any]) -> dict:
        item = self._items.setdefault(post_id, {"id": post_id})
        item.update(copy.deepcopy(fields))
        return copy.deepcopy(item)

    def delete(self, post_id: PostId | float) -> None:
        self._items.pop(post_id, None)

    def health_check(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._items)
