"""Post Records — pure construction of new posts and PATCH field sets.

Invariants:
    - `id` is the creation instant in milliseconds; collisions are accepted
    - `ttl` is always server-computed at creation (seconds, not milliseconds)
    - Omitted or null create fields fall back to defaults; PATCH fields never do
    - `id` is never part of an update field set

Design Decisions:
    - The clock reading is an argument so callers (and tests) own time
"""

from typing import Any

from postboard.core.domain_types import EpochMillis, EpochSeconds, MUTABLE_POST_FIELDS, PostId


def to_epoch_millis(now: float) -> EpochMillis:
    return EpochMillis(int(now * 1000))


def to_epoch_seconds(now: float) -> EpochSeconds:
    return EpochSeconds(int(now))


def new_post(
    now: float,
    retention_seconds: int,
    content: str | None = None,
    timestamp: int | None = None,
    votes: int | None = None,
) -> dict:
    """Build the full record written by a create. Pure, no IO."""
    created_ms = to_epoch_millis(now)
    return {
        "id": PostId(created_ms),
        "content": content if content is not None else "",
        "timestamp": timestamp if timestamp is not None else created_ms,
        "votes": votes if votes is not None else 0,
        "ttl": to_epoch_seconds(now) + retention_seconds,
    }


def update_fields(present: dict[str, Any]) -> dict[str, Any]:
    """Keep only mutable fields, in their canonical order."""
    return {
        name: present[name] for name in MUTABLE_POST_FIELDS if name in present
    }
