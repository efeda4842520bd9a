"""Lambda Entry Point — `postboard.lambda_handler.handler`.

Invariants:
    - Never raises: every failure is already a proxy response from the dispatcher
"""

from typing import Any

from postboard.dependencies import get_dispatch


def handler(event: dict, context: Any = None) -> dict:
    return get_dispatch().dispatch(event)
