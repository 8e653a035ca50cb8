"""Book Routes — create, read and soft-delete Books over HTTP.

Invariants:
    - Request bodies validated by Pydantic before reaching the handler
    - Domain errors (BookApiError) are raised, not converted here:
      the global handler in api/error_handlers.py maps them to status codes
    - DELETE is idempotent: 204 for an active or an already-deleted Book, 404 only if unknown

Design Decisions:
    - get_book_service builds repository + service per request from the request's
      AsyncSession (ADR: constructor injection, overridable in tests)
    - 204 over 200 for DELETE: nothing to return once the flag is set
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from book_api.core.domain_types import BookId
from book_api.infrastructure.book_repository import SqlAlchemyBookRepository
from book_api.infrastructure.database import get_db
from book_api.schemas.book import BookCreate, BookResponse
from book_api.services.book_service import BookService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/v1/books", tags=["books"])


def get_book_service(db: AsyncSession = Depends(get_db)) -> BookService:
    """FastAPI dependency — BookService bound to the request's DB session."""
    return BookService(SqlAlchemyBookRepository(db))


@router.post(
    "", response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_book(
    body: BookCreate, service: BookService = Depends(get_book_service),
):
    """Create a new Book."""
    return await service.create_book(body)


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(
    book_id: UUID, service: BookService = Depends(get_book_service),
):
    """Get an active Book. Soft-deleted Books are reported as not found."""
    return await service.get_book(BookId(book_id))


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_book(
    book_id: UUID, service: BookService = Depends(get_book_service),
):
    """Soft-delete a Book."""
    await service.delete_book_by_id(BookId(book_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
