"""Process-wide wiring — one repository and one dispatcher per process.

Invariants:
    - build_repository() is the only place a storage backend is chosen
    - get_dispatch() is cached (lru_cache): warm Lambda invocations reuse the
      boto3 Table and skip logging setup

Design Decisions:
    - Shared by the Lambda entry point and the FastAPI app (as a dependency
      tests can override)
"""

import logging
from functools import lru_cache

from postboard.config import Settings, get_settings
from postboard.core.repository_protocols import PostRepository
from postboard.infrastructure.dynamodb import DynamoPostRepository
from postboard.infrastructure.memory import InMemoryPostRepository
from postboard.infrastructure.observability import setup_logging
from postboard.services.request_dispatch import RequestDispatch

logger = logging.getLogger(__name__)


def build_repository(settings: Settings) -> PostRepository:
    if settings.storage_backend == "memory":
        return InMemoryPostRepository()
    return DynamoPostRepository.from_settings(settings)


@lru_cache
def get_repository() -> PostRepository:
    settings = get_settings()
    repository = build_repository(settings)
    logger.info(
        f"Post storage: {settings.storage_backend} ({settings.posts_table_name})",
    )
    return repository


@lru_cache
def get_dispatch() -> RequestDispatch:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    return RequestDispatch(get_repository(), settings)
