"""Proxy Envelopes — API Gateway proxy event in, proxy response out.

Invariants:
    - ProxyEvent tolerates every extra field API Gateway sends (extra="allow")
    - ProxyResponse.body is always a JSON string; headers omitted when absent
    - Base64 bodies are decoded before JSON parsing

Design Decisions:
    - Aliases keep the wire names (httpMethod, statusCode) while Python code
      uses snake_case
"""

import base64
import binascii
import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from postboard.core.errors import MalformedBodyError


class ProxyEvent(BaseModel):
    """Inbound request descriptor from the hosting platform."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    http_method: str | None = Field(None, alias="httpMethod")
    query: dict[str, str] | None = Field(None, alias="queryStringParameters")
    body: str | None = None
    is_base64_encoded: bool = Field(False, alias="isBase64Encoded")

    def param(self, name: str) -> str | None:
        """Query parameter value, None when absent or empty."""
        value = (self.query or {}).get(name)
        return value or None

    def json_body(self) -> Any:
        """Decode and parse the body. Raises MalformedBodyError."""
        if self.body is None:
            raise MalformedBodyError("body is empty")
        raw = self.body
        if self.is_base64_encoded:
            try:
                raw = base64.b64decode(raw).decode("utf-8")
            except (binascii.Error, UnicodeDecodeError) as e:
                raise MalformedBodyError(f"invalid base64 body ({e})") from e
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise MalformedBodyError(str(e)) from e


class ProxyResponse(BaseModel):
    """Outbound response descriptor returned to the hosting platform."""
    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(alias="statusCode")
    headers: dict[str, str] | None = None
    body: str

    @classmethod
    def with_json(
        cls, status_code: int, payload: Any,
        headers: dict[str, str] | None = None,
    ) -> "ProxyResponse":
        return cls(
            status_code=status_code,
            headers=headers,
            body=json.dumps(payload, default=str),
        )

    def to_event(self) -> dict:
        """Wire shape expected by the Lambda proxy integration."""
        return self.model_dump(by_alias=True, exclude_none=True)
