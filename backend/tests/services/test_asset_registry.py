"""Asset Registry: AssetKind parsing, table mapping and scoped deletes."""

import pytest
from sqlalchemy import select

from portal.core.domain_types import AssetKind
from portal.core.errors import InvalidParameterError
from portal.models import BookCover, LandingPage, MarketingAsset
from portal.services.asset_registry import (
    delete_asset, list_assets, model_for_kind, parse_asset_kind,
)


def test_parse_known_kinds():
    assert parse_asset_kind("covers") is AssetKind.COVERS
    assert parse_asset_kind("landing-page") is AssetKind.LANDING_PAGE


def test_parse_unknown_kind_raises_400():
    with pytest.raises(InvalidParameterError) as exc_info:
        parse_asset_kind("Covers")
    assert exc_info.value.http_status == 400
    assert exc_info.value.code == "INVALID_ASSET_TYPE"


def test_every_kind_has_a_table():
    assert model_for_kind(AssetKind.MARKETING_ASSETS) is MarketingAsset
    assert model_for_kind(AssetKind.COVERS) is BookCover
    assert model_for_kind(AssetKind.LANDING_PAGE) is LandingPage
    assert len({model_for_kind(k) for k in AssetKind}) == len(AssetKind)


async def test_delete_returns_rowcount(test_db, book):
    cover = BookCover(book_id=book.id, cover_type="ebook")
    test_db.add(cover)
    await test_db.commit()

    assert await delete_asset(test_db, AssetKind.COVERS, book.id, cover.id) == 1
    assert await delete_asset(test_db, AssetKind.COVERS, book.id, cover.id) == 0

    result = await test_db.execute(select(BookCover))
    assert result.scalars().all() == []


async def test_delete_ignores_other_books(test_db, book):
    cover = BookCover(book_id=book.id, cover_type="ebook")
    test_db.add(cover)
    await test_db.commit()

    assert await delete_asset(test_db, AssetKind.COVERS, "other-book", cover.id) == 0


async def test_list_scoped_to_book(test_db, book):
    test_db.add_all([
        LandingPage(book_id=book.id, slug="a"),
        LandingPage(book_id=book.id, slug="b"),
    ])
    await test_db.commit()

    rows = await list_assets(test_db, AssetKind.LANDING_PAGE, book.id)
    assert {r.slug for r in rows} == {"a", "b"}
    assert await list_assets(test_db, AssetKind.LANDING_PAGE, "other-book") == []
