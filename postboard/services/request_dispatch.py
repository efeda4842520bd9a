"""Request Dispatch — explicit routing from httpMethod to handler function.

Invariants:
    - Every method->handler mapping is visible — no getattr magic, no auto-discovery
    - Unknown methods return 400 echoing the method and the full event
    - ClientRequestError -> its own status and {"error": ...} body
    - Any other exception -> 512 with {kind, message, detail}; never re-raised
    - Each invocation is independent: no state is written on the dispatcher

Design Decisions:
    - Repository injected, not global: Lambda reuses one dispatcher per process,
      tests pass an in-memory fake
    - Handlers split by concern: read / write / preflight
"""

import logging
import time
from typing import Any, Callable

from postboard.config import Settings, get_settings
from postboard.core.domain_types import HttpMethod
from postboard.core.errors import (
    HANDLER_ERROR_STATUS, ClientRequestError, PostboardError,
    UnsupportedMethodError, error_payload,
)
from postboard.core.repository_protocols import PostRepository
from postboard.schemas.event import ProxyEvent, ProxyResponse
from postboard.services.handle_preflight import PreflightHandlers
from postboard.services.handle_read import ReadHandlers
from postboard.services.handle_write import WriteHandlers

logger = logging.getLogger(__name__)


class RequestDispatch:
    """Routes httpMethod -> handler. Explicit registration, no auto-discovery."""

    def __init__(
        self,
        repository: PostRepository,
        settings: Settings | None = None,
        clock: Callable[[], float] = time.time,
    ):
        settings = settings or get_settings()
        self._include_stack = settings.include_error_stack
        read = ReadHandlers(repository, settings.default_page_count)
        write = WriteHandlers(repository, settings.post_retention_seconds, clock)
        preflight = PreflightHandlers()

        self._handlers = {
            HttpMethod.GET.value: read.get,
            HttpMethod.PUT.value: write.create,
            HttpMethod.PATCH.value: write.patch,
            HttpMethod.DELETE.value: write.delete,
            HttpMethod.OPTIONS.value: preflight.options,
        }

    @property
    def methods(self) -> list[str]:
        return list(self._handlers)

    def dispatch(self, raw_event: Any) -> dict:
        """Lambda-facing entry: proxy event dict in, proxy response dict out."""
        return self.execute(raw_event).to_event()

    def execute(self, raw_event: Any) -> ProxyResponse:
        method = raw_event.get("httpMethod") if isinstance(raw_event, dict) else None
        try:
            event = ProxyEvent.model_validate(raw_event)
            handler = self._handlers.get(event.http_method)
            if handler is None:
                raise UnsupportedMethodError(event.http_method, raw_event)
            response = handler(event)
        except ClientRequestError as exc:
            logger.warning(
                f"Rejected {method} request: {exc.message}",
                extra={"http_method": method, "error_kind": exc.kind.value},
            )
            response = ProxyResponse.with_json(
                exc.http_status, exc.to_response(),
            )
        except Exception as exc:
            kind = exc.kind.value if isinstance(exc, PostboardError) else "internal"
            logger.error(
                f"Unhandled error on {method} request: {exc}",
                extra={"http_method": method, "error_kind": kind},
                exc_info=True,
            )
            response = ProxyResponse.with_json(
                HANDLER_ERROR_STATUS, error_payload(exc, self._include_stack),
            )
        logger.info(
            f"{method} -> {response.status_code}",
            extra={"http_method": method, "status_code": response.status_code},
        )
        return response
