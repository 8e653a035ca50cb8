"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - BookId wraps UUID — never use bare UUID in domain logic
    - Delete state encoded as Enum — no raw bool matching at the boundary

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

BookId = NewType("BookId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class BookState(str, Enum):
    """Soft-delete states. ACTIVE -> DELETED is the only transition (terminal)."""
    ACTIVE = "active"
    DELETED = "deleted"

    @classmethod
    def of(cls, deleted: bool) -> "BookState":
        return cls.DELETED if deleted else cls.ACTIVE


# Required text fields of a Book, in validation order
REQUIRED_BOOK_FIELDS: tuple[str, ...] = ("title", "synopsis", "author")
