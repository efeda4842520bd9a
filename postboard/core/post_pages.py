"""Post Pages — pure ordering and pagination over a full table scan.

Invariants:
    - Ordering key is `timestamp` only, newest first; `id` never participates
    - Equal timestamps keep scan order (stable sort) — not a contract, scan order isn't
    - Slices follow Python slice semantics, so a negative count trims from the end
    - A `before` anchor that is missing or not numeric raises AnchorNotFoundError
    - Fractional ids are valid lookups; only NaN, infinities and non-numbers are rejected

Design Decisions:
    - Query parameters arrive as strings and are coerced here, next to their use
    - Unparseable counts select nothing instead of raising
"""

import math

from postboard.core.domain_types import PostId
from postboard.core.errors import AnchorNotFoundError, InvalidPostIdError


def parse_post_id(raw: str | None) -> PostId | float | None:
    """Numeric coercion of an id parameter. None when it isn't a finite number.

    Fractional values pass through as floats: no stored id can equal them,
    so lookups simply find nothing.
    """
    if raw is None:
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    if not value.is_integer():
        return value
    return PostId(int(value))


def parse_count(raw: str | None, default: int) -> int | None:
    """Coerce `count` to a slice bound. None means unbounded."""
    if raw is None:
        return default
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return None if value > 0 else 0
    return int(value)


def sort_newest_first(posts: list[dict]) -> list[dict]:
    """Return a new list ordered by `timestamp`, most recent first."""
    return sorted(posts, key=lambda p: p.get("timestamp") or 0, reverse=True)


def latest_page(posts: list[dict], count: int | None) -> list[dict]:
    """The `count` most recent posts."""
    return sort_newest_first(posts)[:count]


def page_before(posts: list[dict], anchor: str, count: int | None) -> list[dict]:
    """The `count` posts that follow the anchor post in newest-first order."""
    anchor_id = parse_post_id(anchor)
    ordered = sort_newest_first(posts)
    index = None
    if anchor_id is not None:
        index = next(
            (i for i, p in enumerate(ordered) if p.get("id") == anchor_id), None,
        )
    if index is None:
        raise AnchorNotFoundError(anchor)
    start = index + 1
    stop = None if count is None else start + count
    return ordered[start:stop]


def require_post_id(raw: str) -> PostId | float:
    """Numeric coercion for lookups that cannot proceed without a number."""
    post_id = parse_post_id(raw)
    if post_id is None:
        raise InvalidPostIdError(raw)
    return post_id
