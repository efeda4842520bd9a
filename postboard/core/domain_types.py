"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PostId wraps the integer creation instant in milliseconds
    - Dispatched methods encoded as an Enum — no raw string matching downstream
    - MUTABLE_POST_FIELDS is the complete set a PATCH may touch; `id` is never in it

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: compares equal to the raw httpMethod string from the event
"""

from enum import Enum
from typing import NewType


# ─── Identity / Value Types ──────────────────────────────────────

PostId = NewType("PostId", int)
EpochMillis = NewType("EpochMillis", int)
EpochSeconds = NewType("EpochSeconds", int)


# ─── Enums ───────────────────────────────────────────────────────

class HttpMethod(str, Enum):
    """Methods the dispatcher routes. Anything else is a 400."""
    GET = "GET"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"


class ListMode(str, Enum):
    """GET modes, in precedence order."""
    LATEST = "latest"
    BEFORE = "before"
    BY_ID = "id"
    ALL = "all"


MUTABLE_POST_FIELDS = ("content", "timestamp", "votes", "ttl")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": ",".join(m.value for m in HttpMethod),
}
