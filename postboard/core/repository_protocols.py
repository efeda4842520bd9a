"""Boundary Protocols — contract between the handlers and the post table.

Invariants:
    - Handlers NEVER import boto3 — all table IO goes through PostRepository
    - Records cross the boundary as plain dicts with int/float numbers (no Decimal)
    - Implementations raise core.errors.StorageError for collaborator failures

Design Decisions:
    - Protocol over ABC: structural subtyping, the in-memory fake needs no base class
    - Synchronous: one invocation awaits each table call in turn, nothing overlaps
"""

from typing import Any, Protocol

from postboard.core.domain_types import PostId


class PostRepository(Protocol):
    """Contract for post persistence — implemented by infrastructure/."""
    def scan(self) -> list[dict]: ...
    def get(self, post_id: PostId | float) -> dict | None: ...
    def put(self, item: dict) -> None: ...
    def update(self, post_id: PostId | float, fields: dict[str, Any]) -> dict: ...
    def delete(self, post_id: PostId | float) -> None: ...
    def health_check(self) -> bool: ...
