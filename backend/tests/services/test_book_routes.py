"""Book Routes — HTTP contract for create, read and soft-delete.

Invariants:
    - POST /v1/books → 201 with camelCase body (id, createdAt, modifiedAt=null)
    - Missing/blank fields or no body → 400 VALIDATION_ERROR
    - DELETE unknown → 404; DELETE known → 204, repeated DELETE → 204 with no new write
    - GET after DELETE → 404, while the row stays in the table with deleted = true
    - A failing commit surfaces as 503 DATABASE_ERROR
"""

from uuid import UUID, uuid4

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from book_api.models.book import Book
from book_api.services.book_service import BookService
from book_api.api.routes.books import get_book_service
from book_api.infrastructure.database import get_db
from book_api.main import app

from tests.services.fake_book_repository import FakeBookRepository

BOOK = {"title": "T", "synopsis": "S", "author": "A"}


async def _create(client, payload=None) -> dict:
    res = await client.post("/v1/books", json=payload or BOOK)
    assert res.status_code == 201
    return res.json()


async def _stored(test_session_factory, book_id: str) -> Book | None:
    async with test_session_factory() as db:
        return await db.get(Book, UUID(book_id))


# ─── POST /v1/books ──────────────────────────────────────────────

async def test_create_returns_201_with_persisted_book(client):
    body = await _create(client)
    assert body["id"]
    assert body["title"] == "T"
    assert body["synopsis"] == "S"
    assert body["author"] == "A"
    assert body["deleted"] is False
    assert body["createdAt"]
    assert body["modifiedAt"] is None


async def test_create_strips_surrounding_whitespace(client):
    body = await _create(
        client, {"title": "  Dune ", "synopsis": " Spice ", "author": " Herbert "},
    )
    assert (body["title"], body["synopsis"], body["author"]) == (
        "Dune", "Spice", "Herbert",
    )


@pytest.mark.parametrize("field", ["title", "synopsis", "author"])
async def test_create_blank_field_returns_400(client, field):
    res = await client.post("/v1/books", json={**BOOK, field: "   "})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"][0]["field"] == f"body.{field}"
    assert f"{field.capitalize()} is required" in error["details"][0]["message"]


async def test_create_missing_field_returns_400(client):
    res = await client.post(
        "/v1/books", json={"synopsis": "S", "author": "A"},
    )
    assert res.status_code == 400
    detail = res.json()["error"]["details"][0]
    assert detail["field"] == "body.title"
    assert "Title is required" in detail["message"]


@pytest.mark.parametrize("field", ["title", "synopsis", "author"])
async def test_create_null_field_returns_400(client, field):
    res = await client.post("/v1/books", json={**BOOK, field: None})
    assert res.status_code == 400
    detail = res.json()["error"]["details"][0]
    assert detail["field"] == f"body.{field}"
    assert f"{field.capitalize()} is required" in detail["message"]


async def test_create_accepts_padded_title_of_max_length(client):
    body = await _create(client, {**BOOK, "title": " " + "x" * 255})
    assert body["title"] == "x" * 255


async def test_create_without_body_returns_400(client):
    res = await client.post("/v1/books")
    assert res.status_code == 400


async def test_create_inconsistent_store_returns_500(client):
    fake = FakeBookRepository()
    fake.save_returns_none = True
    app.dependency_overrides[get_book_service] = lambda: BookService(fake)

    res = await client.post("/v1/books", json=BOOK)

    assert res.status_code == 500
    assert res.json()["error"]["code"] == "INCONSISTENT_STATE"


# ─── GET /v1/books/{id} ──────────────────────────────────────────

async def test_get_returns_active_book(client):
    created = await _create(client)
    res = await client.get(f"/v1/books/{created['id']}")
    assert res.status_code == 200
    assert res.json()["id"] == created["id"]


async def test_get_unknown_returns_404(client):
    res = await client.get(f"/v1/books/{uuid4()}")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_get_malformed_id_returns_400(client):
    res = await client.get("/v1/books/not-a-uuid")
    assert res.status_code == 400


# ─── DELETE /v1/books/{id} ───────────────────────────────────────

async def test_delete_unknown_returns_404(client):
    fake_id = uuid4()
    res = await client.delete(f"/v1/books/{fake_id}")
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["code"] == "RESOURCE_NOT_FOUND"
    assert error["context"]["book_id"] == str(fake_id)


async def test_delete_returns_204_and_soft_deletes(client, test_session_factory):
    created = await _create(client)

    res = await client.delete(f"/v1/books/{created['id']}")

    assert res.status_code == 204
    stored = await _stored(test_session_factory, created["id"])
    assert stored is not None
    assert stored.deleted is True
    assert stored.modified_at is not None


async def test_get_after_delete_returns_404(client):
    created = await _create(client)
    await client.delete(f"/v1/books/{created['id']}")
    res = await client.get(f"/v1/books/{created['id']}")
    assert res.status_code == 404


async def test_delete_twice_is_idempotent(client, test_session_factory):
    created = await _create(client)
    await client.delete(f"/v1/books/{created['id']}")
    first = await _stored(test_session_factory, created["id"])

    res = await client.delete(f"/v1/books/{created['id']}")

    assert res.status_code == 204
    second = await _stored(test_session_factory, created["id"])
    assert second.deleted is True
    assert second.modified_at == first.modified_at


# ─── Store failures ──────────────────────────────────────────────

async def _failing_commit(self):
    raise OperationalError("COMMIT", {}, ConnectionError("connection lost"))


async def test_create_commit_failure_returns_503(client, monkeypatch):
    monkeypatch.setattr(AsyncSession, "commit", _failing_commit)

    res = await client.post("/v1/books", json=BOOK)

    assert res.status_code == 503
    error = res.json()["error"]
    assert error["code"] == "DATABASE_ERROR"
    assert error["context"]["operation"] == "execute"
    assert "connection lost" not in error["message"]


async def test_delete_commit_failure_through_session_manager_returns_503(
    client, monkeypatch, test_session_factory,
):
    created = await _create(client)
    # Real get_db: requests go through the patched db_manager.session()
    app.dependency_overrides.pop(get_db)
    monkeypatch.setattr(AsyncSession, "commit", _failing_commit)

    res = await client.delete(f"/v1/books/{created['id']}")

    assert res.status_code == 503
    assert res.json()["error"]["code"] == "DATABASE_ERROR"
    monkeypatch.undo()
    stored = await _stored(test_session_factory, created["id"])
    assert stored.deleted is False
