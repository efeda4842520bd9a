"""DynamoDB Post Repository — boto3 Table resource behind the PostRepository protocol.

Invariants:
    - scan() follows LastEvaluatedKey until the whole table has been read
    - Every number leaving this module is int or float (Decimal never escapes)
    - ClientError / BotoCoreError mapped to StorageError with the operation name
    - Fractional ids are keyed as Decimal; the table never sees a Python float
    - update() is an unconditional SET with ReturnValues=ALL_NEW (upserts if absent)

Design Decisions:
    - Resource API over the low-level client: native Python values, no
      {"N": "..."} marshalling in handler code
    - Attribute-name placeholders for every SET target: `timestamp` and `ttl`
      are DynamoDB reserved words
    - One Table per process, built by from_settings() and reused across invocations
"""

import logging
from contextlib import contextmanager
from decimal import Decimal
from typing import Any, Iterator

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from postboard.config import Settings
from postboard.core.domain_types import PostId
from postboard.core.errors import StorageError

logger = logging.getLogger(__name__)


def from_dynamo(obj: Any) -> Any:
    """Recursively convert Decimal -> int/float so json.dumps works."""
    if isinstance(obj, list):
        return [from_dynamo(x) for x in obj]
    if isinstance(obj, dict):
        return {k: from_dynamo(v) for k, v in obj.items()}
    if isinstance(obj, Decimal):
        return int(obj) if obj % 1 == 0 else float(obj)
    return obj


def key_for(post_id: PostId | float) -> dict:
    """Primary key for an id; boto3 rejects Python floats, so they go as Decimal."""
    if isinstance(post_id, float):
        return {"id": Decimal(str(post_id))}
    return {"id": post_id}


def build_update(fields: dict[str, Any]) -> tuple[str, dict, dict]:
    """SET expression, attribute names and values for a partial update."""
    names = {f"#{name}": name for name in fields}
    values = {f":{name}": value for name, value in fields.items()}
    expression = "SET " + ", ".join(f"#{name} = :{name}" for name in fields)
    return expression, names, values


@contextmanager
def _mapped_errors(operation: str) -> Iterator[None]:
    """Translate botocore failures into StorageError."""
    try:
        yield
    except ClientError as e:
        error = e.response.get("Error", {})
        logger.error(
            f"DynamoDB {operation} failed: {error.get('Code')}",
            extra={"operation": operation},
        )
        raise StorageError(
            error.get("Message") or str(e), operation, error.get("Code"),
        ) from e
    except BotoCoreError as e:
        logger.error(
            f"DynamoDB {operation} failed: {e}", extra={"operation": operation},
        )
        raise StorageError(str(e), operation) from e


class DynamoPostRepository:
    """Post persistence in a single DynamoDB table keyed by numeric `id`."""

    def __init__(self, table):
        self._table = table

    @classmethod
    def from_settings(cls, settings: Settings) -> "DynamoPostRepository":
        resource = boto3.resource(
            "dynamodb",
            region_name=settings.aws_region,
            endpoint_url=settings.dynamodb_endpoint_url,
        )
        return cls(resource.Table(settings.posts_table_name))

    def scan(self) -> list[dict]:
        items: list[dict] = []
        kwargs: dict[str, Any] = {}
        with _mapped_errors("scan"):
            while True:
                response = self._table.scan(**kwargs)
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                kwargs["ExclusiveStartKey"] = last_key
        return from_dynamo(items)

    def get(self, post_id: PostId | float) -> dict | None:
        with _mapped_errors("get"):
            response = self._table.get_item(Key=key_for(post_id))
        item = response.get("Item")
        return from_dynamo(item) if item is not None else None

    def put(self, item: dict) -> None:
        with _mapped_errors("put"):
            self._table.put_item(Item=item)

    def update(self, post_id: PostId | float, fields: dict[str, Any]) -> dict:
        expression, names, values = build_update(fields)
        with _mapped_errors("update"):
            response = self._table.update_item(
                Key=key_for(post_id),
                UpdateExpression=expression,
                ExpressionAttributeNames=names,
                ExpressionAttributeValues=values,
                ReturnValues="ALL_NEW",
            )
        return from_dynamo(response.get("Attributes", {}))

    def delete(self, post_id: PostId | float) -> None:
        with _mapped_errors("delete"):
            self._table.delete_item(Key=key_for(post_id))

    def health_check(self) -> bool:
        """Check table reachability (for the readiness check)."""
        try:
            with _mapped_errors("describe"):
                self._table.meta.client.describe_table(
                    TableName=self._table.name,
                )
            return True
        except StorageError as e:
            logger.error(f"DynamoDB health check failed: {e}")
            return False
