"""Root conftest — shared test configuration and fixtures.

Invariants:
    - Tests never reach AWS: storage is the in-memory repository unless a test
      builds a DynamoPostRepository around a mock table
    - Time is frozen through the injected clock, never patched globally
"""

import os

# Ensure tests don't accidentally use a real table or real credentials
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")

import pytest

from postboard.config import Settings
from postboard.infrastructure.memory import InMemoryPostRepository
from postboard.services.request_dispatch import RequestDispatch

# 2023-11-14T22:13:20Z
FROZEN_NOW = 1_700_000_000.0


def _make_event(method, query=None, body=None, **extra) -> dict:
    """Minimal API Gateway proxy event."""
    return {
        "httpMethod": method,
        "queryStringParameters": query,
        "body": body,
        **extra,
    }


@pytest.fixture
def make_event():
    return _make_event


@pytest.fixture
def settings():
    return Settings(storage_backend="memory", include_error_stack=True)


@pytest.fixture
def repository():
    return InMemoryPostRepository()


@pytest.fixture
def clock():
    return lambda: FROZEN_NOW


@pytest.fixture
def dispatch(repository, settings, clock):
    return RequestDispatch(repository, settings, clock)


@pytest.fixture
def seeded_repository(repository):
    """Three posts whose id order disagrees with their timestamp order."""
    repository.put({"id": 1, "content": "b", "timestamp": 200, "votes": 0, "ttl": 9})
    repository.put({"id": 2, "content": "c", "timestamp": 100, "votes": 0, "ttl": 9})
    repository.put({"id": 3, "content": "a", "timestamp": 300, "votes": 4, "ttl": 9})
    return repository
