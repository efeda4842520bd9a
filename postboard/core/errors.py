"""Error Hierarchy — typed, categorized exceptions for every handler failure mode.

Invariants:
    - Every error has a kind (ErrorKind), message (str), and http_status (int)
    - Client errors (400, 513) carry their own response body via to_response()
    - Everything else is reported as 512 through error_payload(), never by
      reflecting over an exception's attributes

Design Decisions:
    - Single hierarchy with PostboardError base: the dispatcher catches it once
    - 512 and 513 are nonstandard on purpose; existing clients depend on them
"""

import traceback
from enum import Enum
from typing import Any


HANDLER_ERROR_STATUS = 512
ANCHOR_NOT_FOUND_STATUS = 513


class ErrorKind(str, Enum):
    """High-level error kinds, surfaced verbatim in 512 payloads."""
    BAD_REQUEST = "bad_request"
    ANCHOR_NOT_FOUND = "anchor_not_found"
    MALFORMED_BODY = "malformed_body"
    STORAGE = "storage"
    INTERNAL = "internal"


class PostboardError(Exception):
    """Base exception for all Postboard errors."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        http_status: int = HANDLER_ERROR_STATUS,
        detail: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.http_status = http_status
        self.detail = detail or {}


# ─── Client Errors (reported with their own status) ─────────────

class ClientRequestError(PostboardError):
    """Request was understood but cannot be served as sent."""

    def to_response(self) -> dict:
        """Body returned to the caller — {"error": message} plus extras."""
        return {"error": self.message, **self.detail}


class UnsupportedMethodError(ClientRequestError):
    """httpMethod is not one of the dispatched methods."""
    def __init__(self, method: str | None, event: dict):
        super().__init__(
            f"Unsupported method {method}", ErrorKind.BAD_REQUEST, 400,
            {"event": event},
        )
        self.method = method


class MissingPostIdError(ClientRequestError):
    """PATCH / DELETE sent without an id query parameter."""
    def __init__(self):
        super().__init__("Missing post ID", ErrorKind.BAD_REQUEST, 400)


class NoFieldsToUpdateError(ClientRequestError):
    """PATCH body names none of the mutable post fields."""
    def __init__(self):
        super().__init__("No fields to update", ErrorKind.BAD_REQUEST, 400)


class AnchorNotFoundError(ClientRequestError):
    """The `before` pagination anchor is not in the table."""
    def __init__(self, anchor: str):
        super().__init__(
            f"No item found by id {anchor}",
            ErrorKind.ANCHOR_NOT_FOUND, ANCHOR_NOT_FOUND_STATUS,
        )
        self.anchor = anchor


# ─── Server Errors (always 512) ─────────────────────────────────

class InvalidPostIdError(PostboardError):
    """An id parameter that cannot be coerced to a number."""
    def __init__(self, raw: str):
        super().__init__(
            f"Invalid post ID {raw}", ErrorKind.BAD_REQUEST,
            detail={"id": raw},
        )


class MalformedBodyError(PostboardError):
    """Request body is not JSON or does not fit the post payload shape."""
    def __init__(self, message: str, errors: list | None = None):
        super().__init__(
            f"Malformed request body: {message}", ErrorKind.MALFORMED_BODY,
            detail={"errors": errors} if errors else None,
        )


class StorageError(PostboardError):
    """Table operation failed at the storage collaborator."""
    def __init__(
        self, message: str, operation: str, code: str | None = None,
    ):
        super().__init__(
            f"Storage {operation} failed: {message}", ErrorKind.STORAGE,
            detail={"operation": operation, "code": code},
        )
        self.operation = operation
        self.code = code


def error_payload(exc: BaseException, include_stack: bool = True) -> dict:
    """Build the {kind, message, detail} body reported with status 512."""
    if isinstance(exc, PostboardError):
        kind, message, detail = exc.kind, exc.message, dict(exc.detail)
    else:
        kind, message, detail = ErrorKind.INTERNAL, str(exc), {}
    detail["type"] = type(exc).__name__
    if include_stack:
        detail["stack"] = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__),
        )
    return {"kind": kind.value, "message": message, "detail": detail}
