"""Preflight Handler — CORS OPTIONS answer. Stateless, never touches storage."""

from postboard.core.domain_types import CORS_HEADERS
from postboard.schemas.event import ProxyEvent, ProxyResponse


class PreflightHandlers:
    """OPTIONS — fixed CORS grant for any origin."""

    def options(self, event: ProxyEvent) -> ProxyResponse:
        return ProxyResponse.with_json(
            200, {"success": True}, headers=dict(CORS_HEADERS),
        )
