"""Write Handlers — PUT (create), PATCH (partial update), DELETE.

Invariants:
    - PUT writes once then reads back by id; the read-back record is returned
    - PATCH and DELETE require an `id` query parameter (MissingPostIdError)
    - PATCH with no mutable field present performs no write (NoFieldsToUpdateError)
    - A PATCH body that is an array or scalar has no fields (400, not 512)
    - DELETE never checks existence; deleting a missing post succeeds

Design Decisions:
    - Read-after-write on create returns what was persisted, not what was built
    - clock injected so tests pin `id`, `timestamp` and `ttl`
"""

import logging
import time
from typing import Callable

from postboard.core.errors import MissingPostIdError, NoFieldsToUpdateError
from postboard.core.post_pages import require_post_id
from postboard.core.post_records import new_post, update_fields
from postboard.core.repository_protocols import PostRepository
from postboard.schemas.event import ProxyEvent, ProxyResponse
from postboard.schemas.post import Post, PostCreate, PostPatch

logger = logging.getLogger(__name__)


class WriteHandlers:
    """Mutating methods — create, patch, delete."""

    def __init__(
        self,
        repository: PostRepository,
        retention_seconds: int,
        clock: Callable[[], float] = time.time,
    ):
        self.repository = repository
        self.retention_seconds = retention_seconds
        self.clock = clock

    def create(self, event: ProxyEvent) -> ProxyResponse:
        draft = PostCreate.from_body(event.json_body())
        post = Post(**new_post(
            self.clock(),
            self.retention_seconds,
            content=draft.content,
            timestamp=draft.timestamp,
            votes=draft.votes,
        ))
        self.repository.put(post.model_dump())
        logger.info("Post created", extra={"post_id": post.id})
        return ProxyResponse.with_json(200, self.repository.get(post.id))

    def patch(self, event: ProxyEvent) -> ProxyResponse:
        raw_id = event.param("id")
        if raw_id is None:
            raise MissingPostIdError()
        data = event.json_body()
        if data is not None and not isinstance(data, dict):
            # arrays and scalars carry no fields; null still fails validation
            raise NoFieldsToUpdateError()
        draft = PostPatch.from_body(data)
        fields = update_fields(draft.present_fields())
        if not fields:
            raise NoFieldsToUpdateError()
        post_id = require_post_id(raw_id)
        updated = self.repository.update(post_id, fields)
        logger.info(
            f"Post updated: {', '.join(fields)}", extra={"post_id": post_id},
        )
        return ProxyResponse.with_json(200, updated)

    def delete(self, event: ProxyEvent) -> ProxyResponse:
        raw_id = event.param("id")
        if raw_id is None:
            raise MissingPostIdError()
        post_id = require_post_id(raw_id)
        self.repository.delete(post_id)
        logger.info("Post deleted", extra={"post_id": post_id})
        return ProxyResponse.with_json(200, {"success": True})
