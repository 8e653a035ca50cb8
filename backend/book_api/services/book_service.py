"""Book Service — lifecycle of a Book: create, read (active only), soft-delete.

Invariants:
    - Owns no storage: every read/write goes through the injected BookRepository
    - create_book never calls save() when validation fails
    - delete_book_by_id calls save() at most once per effective transition;
      an already-deleted record is a silent no-op (idempotent DELETE)
    - Store exceptions propagate unchanged (no retry, no wrapping)

Design Decisions:
    - Constructor injection of the repository: routes build it per request,
      tests hand in an in-memory fake
    - delete_book_by_id reads then conditionally writes without a row lock:
      concurrent deletes of one id may both save. Known gap, left as-is
"""

import logging

from book_api.core.domain_types import BookId, BookState
from book_api.core.enforce_book import check_create_request, needs_soft_delete
from book_api.core.errors import InconsistentStateError, ResourceNotFoundError
from book_api.core.repository_protocols import BookLike, BookRepository
from book_api.models.book import new_book

logger = logging.getLogger(__name__)


class BookService:
    """Create and soft-delete Books on top of a BookRepository."""

    def __init__(self, repository: BookRepository):
        self._repository = repository

    async def create_book(self, request) -> BookLike:
        """Validate request, persist a new active Book, return the stored record.

        Raises:
            InvalidArgumentError: request is None.
            BookValidationError: title, synopsis or author missing/blank.
            InconsistentStateError: store returned no record.
        """
        check_create_request(request)
        book = new_book(
            title=request.title,
            synopsis=request.synopsis,
            author=request.author,
        )
        saved = await self._repository.save(book)
        if saved is None:
            raise InconsistentStateError("create_book")
        logger.info("Book created", extra={"book_id": saved.id})
        return saved

    async def get_book(self, book_id: BookId) -> BookLike:
        """Return an active Book; deleted or unknown ids are not found."""
        book = await self._repository.find_active_by_id(book_id)
        if book is None:
            raise ResourceNotFoundError("Book", str(book_id))
        return book

    async def delete_book_by_id(self, book_id: BookId) -> None:
        """Soft-delete a Book. Repeating the call on a deleted Book does nothing."""
        book = await self._repository.find_by_id(book_id)
        if book is None:
            logger.warning(
                "Delete requested for unknown book", extra={"book_id": book_id},
            )
            raise ResourceNotFoundError("Book", str(book_id))

        if not needs_soft_delete(book.deleted):
            logger.info(
                "Book already deleted, nothing to do",
                extra={"book_id": book_id, "state": BookState.of(book.deleted).value},
            )
            return

        book.deleted = True
        await self._repository.save(book)
        logger.info("Book soft-deleted", extra={"book_id": book_id})
