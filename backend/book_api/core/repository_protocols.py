"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no inheritance
    - Async in Protocol: implementations do IO, the service awaits them
"""

from datetime import datetime
from typing import Protocol

from book_api.core.domain_types import BookId


class BookLike(Protocol):
    """Structural contract for Book records passed between service and store.

    Avoids coupling the service to the ORM model while giving mypy
    real type information (unlike Any).
    """
    id: BookId | None
    title: str
    synopsis: str
    author: str
    deleted: bool
    created_at: datetime | None
    modified_at: datetime | None


class BookRepository(Protocol):
    """Contract for Book persistence — implemented by shell.

    save() assigns id and created_at on first insert, stamps modified_at on
    every later save of an existing key, and never drops stored fields.
    find_by_id() ignores the deleted flag; find_active_by_id() excludes it.
    """
    async def save(self, book: BookLike) -> BookLike | None: ...
    async def find_by_id(self, book_id: BookId) -> BookLike | None: ...
    async def find_active_by_id(self, book_id: BookId) -> BookLike | None: ...
