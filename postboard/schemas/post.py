"""Post Schemas — typed create/patch payloads and the stored post shape.

Invariants:
    - PostCreate: every field optional; `id` and `ttl` in the body are ignored
    - PostPatch: presence is read from model_fields_set, never from truthiness,
      so explicit 0, "" and null are all applied
    - Parse failures surface as MalformedBodyError (reported as 512)

Design Decisions:
    - Lax pydantic coercion ("5" -> 5) is the only input sanitization performed
    - Coercion is one-way: strings become ints, but a number is never accepted
      as `content`, so {"content": 5} is a malformed body
    - Unknown body fields are ignored, not rejected
"""

from typing import Any

from pydantic import BaseModel, ValidationError

from postboard.core.errors import MalformedBodyError


class Post(BaseModel):
    """A stored post, as written at creation."""
    id: int
    content: str = ""
    timestamp: int
    votes: int = 0
    ttl: int


class _BodyModel(BaseModel):
    @classmethod
    def from_body(cls, data: Any):
        """Validate a parsed JSON body, mapping failures to MalformedBodyError."""
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise MalformedBodyError(
                f"{cls.__name__} validation failed",
                errors=e.errors(include_url=False, include_context=False),
            ) from e


class PostCreate(_BodyModel):
    """PUT body — whatever the caller chose to supply."""
    content: str | None = None
    timestamp: int | None = None
    votes: int | None = None


class PostPatch(_BodyModel):
    """PATCH body — only explicitly present fields are written."""
    content: str | None = None
    timestamp: int | None = None
    votes: int | None = None
    ttl: int | None = None

    def present_fields(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in self.model_fields_set}
