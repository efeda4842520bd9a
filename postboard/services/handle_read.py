"""Read Handlers — GET in its four mutually exclusive modes.

Invariants:
    - Mode precedence: latest > before > id > (none -> all)
    - latest / before / all read the whole table with one logical scan
    - id mode is a single get; an absent post is returned as JSON null, still 200
    - A missing `before` anchor raises AnchorNotFoundError (513)

Design Decisions:
    - Ordering and slicing live in core.post_pages; this module only does IO
"""

import logging

from postboard.core.domain_types import ListMode
from postboard.core.post_pages import (
    latest_page, page_before, parse_count, require_post_id, sort_newest_first,
)
from postboard.core.repository_protocols import PostRepository
from postboard.schemas.event import ProxyEvent, ProxyResponse

logger = logging.getLogger(__name__)


def list_mode(event: ProxyEvent) -> ListMode:
    """Which GET mode the query parameters select."""
    if event.param("latest"):
        return ListMode.LATEST
    if event.param("before"):
        return ListMode.BEFORE
    if event.param("id"):
        return ListMode.BY_ID
    return ListMode.ALL


class ReadHandlers:
    """GET — list, paginate, or fetch one post."""

    def __init__(self, repository: PostRepository, default_count: int = 1):
        self.repository = repository
        self.default_count = default_count

    def get(self, event: ProxyEvent) -> ProxyResponse:
        mode = list_mode(event)
        count = parse_count(
            (event.query or {}).get("count"), self.default_count,
        )
        logger.debug(
            f"GET posts in {mode.value} mode",
            extra={"mode": mode.value, "count": count},
        )
        if mode is ListMode.LATEST:
            body = latest_page(self.repository.scan(), count)
        elif mode is ListMode.BEFORE:
            body = page_before(
                self.repository.scan(), event.param("before"), count,
            )
        elif mode is ListMode.BY_ID:
            body = self.repository.get(require_post_id(event.param("id")))
        else:
            body = sort_newest_first(self.repository.scan())
        return ProxyResponse.with_json(200, body)
