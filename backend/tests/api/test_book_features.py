"""Book Features: owner-only feature status reads.

Invariants:
    - No session -> 401
    - Unknown book -> 404, even for a caller who would not own it
    - Book owned by someone else -> 403, feature rows never returned
    - Owner -> 200 with the book's rows (possibly empty)
    - Single-feature read defaults to "locked" when no row exists, for any type
    - Database failures -> generic 500 without driver details
"""

from datetime import timedelta
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from portal.models import BookFeature


@pytest.fixture
async def features(test_db, book):
    rows = [
        BookFeature(book_id=book.id, feature_type="summary", status="unlocked"),
        BookFeature(book_id=book.id, feature_type="manuscript-report", status="purchased", price=4999),
    ]
    test_db.add_all(rows)
    await test_db.commit()
    return rows


# ─── GET /api/books/{id}/features ───────────────────────────────

async def test_anonymous_gets_401(client, book):
    res = await client.get(f"/api/books/{book.id}/features")

    assert res.status_code == 401
    assert res.json()["error"]["message"] == "Unauthorized"


async def test_expired_session_gets_401(client, issue_token, owner, book):
    token = await issue_token(owner, expires_in=timedelta(minutes=-1))

    res = await client.get(
        f"/api/books/{book.id}/features",
        headers={"Authorization": f"Bearer {token}"},
    )

    assert res.status_code == 401


async def test_unknown_book_gets_404(client, owner_headers):
    res = await client.get("/api/books/no-such-book/features", headers=owner_headers)

    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Book not found"


async def test_unknown_book_is_404_not_403_for_stranger(client, stranger_headers):
    res = await client.get("/api/books/no-such-book/features", headers=stranger_headers)

    assert res.status_code == 404


async def test_other_users_book_gets_403(client, stranger_headers, book, features):
    res = await client.get(f"/api/books/{book.id}/features", headers=stranger_headers)

    assert res.status_code == 403
    assert "summary" not in res.text


async def test_admin_is_not_owner(client, admin_headers, book, features):
    """Feature reads are owner-only; the admin role grants nothing here."""
    res = await client.get(f"/api/books/{book.id}/features", headers=admin_headers)

    assert res.status_code == 403


async def test_owner_gets_features(client, owner_headers, book, features):
    res = await client.get(f"/api/books/{book.id}/features", headers=owner_headers)

    assert res.status_code == 200
    body = res.json()
    by_type = {f["featureType"]: f for f in body}
    assert set(by_type) == {"summary", "manuscript-report"}
    assert by_type["summary"]["status"] == "unlocked"
    assert by_type["manuscript-report"]["price"] == 4999
    assert all(f["bookId"] == book.id for f in body)


async def test_owner_without_features_gets_empty_list(client, owner_headers, book):
    res = await client.get(f"/api/books/{book.id}/features", headers=owner_headers)

    assert res.status_code == 200
    assert res.json() == []


async def test_signed_cookie_authenticates(client, issue_token, owner, book):
    token = await issue_token(owner)

    res = await client.get(
        f"/api/books/{book.id}/features",
        headers={"Cookie": f"better-auth.session_token={token}.c2lnbmF0dXJl"},
    )

    assert res.status_code == 200


# ─── GET /api/books/{id}/features/{featureType} ─────────────────

async def test_single_feature_returns_row(client, owner_headers, book, features):
    res = await client.get(
        f"/api/books/{book.id}/features/summary", headers=owner_headers,
    )

    assert res.status_code == 200
    assert res.json()["status"] == "unlocked"
    assert res.json()["featureType"] == "summary"


async def test_single_feature_defaults_to_locked(client, owner_headers, book):
    res = await client.get(
        f"/api/books/{book.id}/features/landing-page", headers=owner_headers,
    )

    assert res.status_code == 200
    assert res.json() == {
        "status": "locked", "featureType": "landing-page", "bookId": book.id,
    }


async def test_single_feature_unknown_type_defaults_to_locked(client, owner_headers, book):
    res = await client.get(
        f"/api/books/{book.id}/features/audiobook", headers=owner_headers,
    )

    assert res.status_code == 200
    assert res.json() == {
        "status": "locked", "featureType": "audiobook", "bookId": book.id,
    }


async def test_single_feature_unknown_book_and_type_gets_404(client, owner_headers):
    res = await client.get(
        "/api/books/no-such-book/features/audiobook", headers=owner_headers,
    )

    assert res.status_code == 404


async def test_single_feature_for_other_users_book_gets_403(
    client, stranger_headers, book, features,
):
    res = await client.get(
        f"/api/books/{book.id}/features/summary", headers=stranger_headers,
    )

    assert res.status_code == 403


# ─── Database failures ──────────────────────────────────────────

def _locked_db() -> AsyncMock:
    return AsyncMock(side_effect=OperationalError(
        "SELECT", {}, Exception("database is locked"),
    ))


async def test_list_database_failure_returns_generic_500(
    client, owner_headers, book, monkeypatch,
):
    monkeypatch.setattr("portal.api.routes.book_features.list_features", _locked_db())

    res = await client.get(f"/api/books/{book.id}/features", headers=owner_headers)

    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "DATABASE_ERROR"
    assert error["message"] == "Failed to get features"
    assert "database is locked" not in res.text


async def test_single_feature_database_failure_returns_generic_500(
    client, owner_headers, book, monkeypatch,
):
    monkeypatch.setattr("portal.api.routes.book_features.get_feature", _locked_db())

    res = await client.get(
        f"/api/books/{book.id}/features/summary", headers=owner_headers,
    )

    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "DATABASE_ERROR"
    assert error["message"] == "Failed to get feature status"
    assert "database is locked" not in res.text
