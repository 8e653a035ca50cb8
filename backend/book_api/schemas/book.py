"""Book Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - BookCreate.title / synopsis / author: missing, null or blank -> "<Field> is required"
    - title and author at most 255 chars (column width) after stripping; synopsis unbounded
    - BookResponse serializes camelCase (createdAt, modifiedAt), accepts snake_case too

Design Decisions:
    - mode="before" validator with validate_default: missing and null fields reach the
      same check as blank ones, and the length cap applies to the stripped value
    - alias_generator=to_camel on the response only: request fields are single words
"""

from datetime import datetime
from uuid import UUID

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from book_api.core.enforce_book import required_message

MAX_TEXT_LENGTH: int = 255
BOUNDED_FIELDS: frozenset[str] = frozenset({"title", "author"})


class BookCreate(BaseModel):
    """Book creation — all three text fields required and non-blank."""
    title: str | None = Field(None, validate_default=True)
    synopsis: str | None = Field(None, validate_default=True)
    author: str | None = Field(None, validate_default=True)

    @field_validator("title", "synopsis", "author", mode="before")
    @classmethod
    def strip_required(cls, v: Any, info: ValidationInfo) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError(required_message(info.field_name))
        if not isinstance(v, str):
            return v  # non-str rejected by the str type check
        v = v.strip()
        if info.field_name in BOUNDED_FIELDS and len(v) > MAX_TEXT_LENGTH:
            raise ValueError(
                f"{info.field_name.capitalize()} must be at most "
                f"{MAX_TEXT_LENGTH} characters",
            )
        return v


class BookResponse(BaseModel):
    """Book response — persisted state, including soft-delete flag and timestamps."""
    model_config = ConfigDict(
        from_attributes=True, alias_generator=to_camel, populate_by_name=True,
    )

    id: UUID
    title: str
    synopsis: str
    author: str
    deleted: bool
    created_at: datetime
    modified_at: datetime | None = None
