"""Book ORM — persisted state of a Book resource.

Invariants:
    - id is a UUID primary key, assigned by the repository on first save (never by callers)
    - title, synopsis, author are non-nullable; synopsis is unbounded text
    - deleted defaults to False; rows are never removed (soft delete)
    - created_at is written once; modified_at stays NULL until the first update

Design Decisions:
    - No ORM event hooks for timestamps: the repository's save path stamps them
      explicitly, so the rules are visible and testable with a pinned clock
    - new_book() factory over a builder: only required fields, deleted defaults to False
"""

import uuid
from datetime import datetime

from sqlalchemy import String, Text, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from book_api.db.base import Base


class Book(Base):
    """Book aggregate — the only entity of the service."""
    __tablename__ = "book"

    id: Mapped[uuid.UUID] = mapped_column(UUID(as_uuid=True), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    synopsis: Mapped[str] = mapped_column(Text, nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    modified_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )

    def __repr__(self) -> str:
        return f"<Book id={self.id} title={self.title!r} deleted={self.deleted}>"


def new_book(title: str, synopsis: str, author: str) -> Book:
    """Build a transient Book: no id, no timestamps, deleted=False."""
    return Book(
        title=title, synopsis=synopsis, author=author, deleted=False,
    )
