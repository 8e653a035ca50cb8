"""Book Repository — SQLAlchemy implementation of the BookRepository protocol.

Invariants:
    - save() on a record without id: assigns uuid4 id + created_at, INSERTs
    - save() on a record with id: stamps modified_at, UPDATEs (merge keeps stored fields)
    - save() commits before returning and never returns None
    - find_by_id() ignores the deleted flag; find_active_by_id() filters deleted rows out

Design Decisions:
    - Timestamps stamped here instead of ORM event hooks: one explicit save path
    - Clock injected (Callable[[], datetime]): tests pin created_at / modified_at
    - No soft-delete logic in save(): the store persists exactly what it is given
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Callable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from book_api.core.domain_types import BookId
from book_api.models.book import Book

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SqlAlchemyBookRepository:
    """Book persistence on one AsyncSession (one request)."""

    def __init__(
        self, db: AsyncSession, clock: Callable[[], datetime] = utc_now,
    ):
        self._db = db
        self._clock = clock

    async def save(self, book: Book) -> Book:
        """Insert a new Book or update an existing one, stamping timestamps."""
        now = self._clock()
        if book.id is None:
            book.id = uuid.uuid4()
            book.created_at = now
            self._db.add(book)
            operation = "insert"
        else:
            book.modified_at = now
            book = await self._db.merge(book)
            operation = "update"
        await self._db.commit()
        logger.debug(
            f"Book {operation} committed",
            extra={"book_id": book.id, "operation": operation},
        )
        return book

    async def find_by_id(self, book_id: BookId) -> Book | None:
        """Raw key lookup — returns soft-deleted rows too."""
        return await self._db.get(Book, book_id)

    async def find_active_by_id(self, book_id: BookId) -> Book | None:
        """Key lookup restricted to rows with deleted = false."""
        result = await self._db.execute(
            select(Book).where(Book.id == book_id, Book.deleted.is_(False)),
        )
        return result.scalar_one_or_none()
