"""Book Enforcement — pure creation and soft-delete rules.

Invariants:
    - check_create_request is PURE: raises on the first violation, never mutates input
    - Fields checked in REQUIRED_BOOK_FIELDS order (title, synopsis, author)
    - needs_soft_delete is the single source of truth for the delete short-circuit

Design Decisions:
    - Duck-typed request (getattr): accepts the Pydantic schema or any object
      carrying title/synopsis/author, so the service never imports api schemas
    - Blank check uses str.strip(): whitespace-only is treated as missing
"""

from book_api.core.domain_types import REQUIRED_BOOK_FIELDS
from book_api.core.errors import BookValidationError, InvalidArgumentError


def is_blank(value: object) -> bool:
    """True for None, non-str, empty, or whitespace-only values."""
    return not isinstance(value, str) or not value.strip()


def required_message(field_name: str) -> str:
    return f"{field_name.capitalize()} is required"


def check_create_request(request: object) -> None:
    """Raise InvalidArgumentError / BookValidationError for a bad creation request."""
    if request is None:
        raise InvalidArgumentError("request")
    for field_name in REQUIRED_BOOK_FIELDS:
        if is_blank(getattr(request, field_name, None)):
            raise BookValidationError(required_message(field_name), field_name)


def needs_soft_delete(deleted: bool) -> bool:
    """Only an active record transitions; a deleted one is left untouched."""
    return not deleted
