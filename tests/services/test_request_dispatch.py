"""Request Dispatch — tests for explicit method routing and error wrapping.

Tests cover:
    - All five methods are registered
    - OPTIONS answers the fixed CORS grant without touching storage
    - Unsupported / missing methods -> 400 echoing the event
    - Storage failures and unexpected exceptions -> 512 structured payload
    - Stack traces can be switched off
"""

import json
from unittest.mock import MagicMock

import pytest

from postboard.config import Settings
from postboard.core.errors import StorageError
from postboard.services.request_dispatch import RequestDispatch


def test_dispatch_has_all_five_methods(dispatch):
    assert sorted(dispatch.methods) == ["DELETE", "GET", "OPTIONS", "PATCH", "PUT"]


@pytest.mark.parametrize("query,body", [
    (None, None),
    ({"id": "1", "latest": "1"}, '{"votes": 1}'),
    ({"anything": "x"}, "not json at all"),
])
def test_options_always_returns_cors_grant(settings, make_event, query, body):
    repository = MagicMock()
    dispatch = RequestDispatch(repository, settings)

    response = dispatch.dispatch(make_event("OPTIONS", query, body))

    assert response == {
        "statusCode": 200,
        "headers": {
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": "GET,PUT,PATCH,DELETE,OPTIONS",
        },
        "body": '{"success": true}',
    }
    assert repository.mock_calls == []


@pytest.mark.parametrize("method", ["POST", "HEAD", "get", "TRACE"])
def test_unsupported_method_returns_400_echoing_event(dispatch, make_event, method):
    event = make_event(method, {"id": "1"}, '{"a": 1}', path="/posts")

    response = dispatch.dispatch(event)

    assert response["statusCode"] == 400
    assert json.loads(response["body"]) == {
        "error": f"Unsupported method {method}",
        "event": event,
    }


def test_missing_method_returns_400(dispatch):
    response = dispatch.dispatch({"body": None})
    assert response["statusCode"] == 400
    assert json.loads(response["body"])["error"] == "Unsupported method None"


def test_storage_error_returns_512_payload(settings, make_event):
    repository = MagicMock()
    repository.scan.side_effect = StorageError(
        "Requested resource not found", "scan", "ResourceNotFoundException",
    )
    dispatch = RequestDispatch(repository, settings)

    response = dispatch.dispatch(make_event("GET"))

    assert response["statusCode"] == 512
    payload = json.loads(response["body"])
    assert payload["kind"] == "storage"
    assert payload["message"] == "Storage scan failed: Requested resource not found"
    assert payload["detail"]["operation"] == "scan"
    assert payload["detail"]["code"] == "ResourceNotFoundException"
    assert payload["detail"]["type"] == "StorageError"
    assert "Traceback" in payload["detail"]["stack"]


def test_unexpected_exception_returns_512_internal(settings, make_event):
    repository = MagicMock()
    repository.delete.side_effect = RuntimeError("connection reset")
    dispatch = RequestDispatch(repository, settings)

    response = dispatch.dispatch(make_event("DELETE", {"id": "1"}))

    assert response["statusCode"] == 512
    payload = json.loads(response["body"])
    assert payload["kind"] == "internal"
    assert payload["message"] == "connection reset"
    assert payload["detail"]["type"] == "RuntimeError"


def test_stack_omitted_when_disabled(make_event):
    repository = MagicMock()
    repository.scan.side_effect = RuntimeError("x")
    dispatch = RequestDispatch(
        repository, Settings(storage_backend="memory", include_error_stack=False),
    )

    payload = json.loads(dispatch.dispatch(make_event("GET"))["body"])

    assert "stack" not in payload["detail"]


def test_non_dict_event_returns_512(dispatch):
    response = dispatch.dispatch(None)
    assert response["statusCode"] == 512


def test_error_responses_have_no_headers(dispatch, make_event):
    response = dispatch.dispatch(make_event("POST"))
    assert "headers" not in response


def test_dispatch_logs_status(dispatch, make_event, caplog):
    with caplog.at_level("INFO", logger="postboard.services.request_dispatch"):
        dispatch.dispatch(make_event("OPTIONS"))
    record = caplog.records[-1]
    assert record.status_code == 200
    assert record.http_method == "OPTIONS"
