"""Posts Route — HTTP front door over the Lambda dispatcher for local runs.

Invariants:
    - Every method reaches the dispatcher, including unsupported ones (-> 400)
    - The request is turned into the same proxy event API Gateway would send
    - Status, headers and body come back byte-for-byte from the dispatcher
    - The dispatcher (blocking boto3 IO) runs in the threadpool, never on the loop

Design Decisions:
    - No FastAPI validation or CORS middleware here: the dispatcher owns both,
      so local behaviour cannot drift from Lambda behaviour
"""

import base64

from fastapi import APIRouter, Depends, Request, Response
from starlette.concurrency import run_in_threadpool

from postboard.dependencies import get_dispatch
from postboard.services.request_dispatch import RequestDispatch

router = APIRouter(prefix="/api/v1/posts", tags=["posts"])

_ROUTED_METHODS = ["GET", "PUT", "PATCH", "DELETE", "OPTIONS", "POST"]


async def to_proxy_event(request: Request) -> dict:
    """Build an API Gateway proxy event from an HTTP request."""
    body = await request.body()
    is_base64 = False
    try:
        text = body.decode("utf-8") if body else None
    except UnicodeDecodeError:
        # binary bodies arrive base64-encoded, as API Gateway sends them
        text, is_base64 = base64.b64encode(body).decode("ascii"), True
    return {
        "httpMethod": request.method,
        "path": request.url.path,
        "queryStringParameters": dict(request.query_params) or None,
        "headers": dict(request.headers),
        "body": text,
        "isBase64Encoded": is_base64,
    }


@router.api_route("", methods=_ROUTED_METHODS)
async def proxy_posts(
    request: Request, dispatch: RequestDispatch = Depends(get_dispatch),
):
    """Forward to the dispatcher and relay its response."""
    event = await to_proxy_event(request)
    result = await run_in_threadpool(dispatch.execute, event)
    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers,
        media_type="application/json",
    )
