"""Asset Registry: map AssetKind to its table and run book-scoped queries.

Invariants:
    - parse_asset_kind is the only place a path string becomes an AssetKind
    - model_for_kind is exhaustive over AssetKind (assert_never on the rest)
    - Deletes are scoped to (book_id, asset_id); zero rows deleted is not an error
    - Callers commit; nothing here swallows database errors
"""

import logging
from typing import Sequence, assert_never

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from portal.core.domain_types import AssetKind
from portal.core.errors import InvalidParameterError
from portal.models.asset import BookCover, LandingPage, MarketingAsset

logger = logging.getLogger(__name__)

AssetModel = type[MarketingAsset] | type[BookCover] | type[LandingPage]


def parse_asset_kind(raw: str) -> AssetKind:
    """Parse the {assetType} path segment or raise a 400."""
    try:
        return AssetKind(raw)
    except ValueError:
        raise InvalidParameterError(
            "Invalid asset type", "assetType", code="INVALID_ASSET_TYPE",
        )


def model_for_kind(kind: AssetKind) -> AssetModel:
    match kind:
        case AssetKind.MARKETING_ASSETS:
            return MarketingAsset
        case AssetKind.COVERS:
            return BookCover
        case AssetKind.LANDING_PAGE:
            return LandingPage
        case _:
            assert_never(kind)


async def delete_asset(
    db: AsyncSession, kind: AssetKind, book_id: str, asset_id: str,
) -> int:
    """Delete one asset of a book. Returns the number of rows removed."""
    model = model_for_kind(kind)
    result = await db.execute(
        delete(model).where(model.id == asset_id, model.book_id == book_id),
    )
    await db.commit()
    deleted = result.rowcount or 0
    logger.info(
        f"Deleted {deleted} {kind.value} row(s)",
        extra={"book_id": book_id, "asset_type": kind.value, "asset_id": asset_id},
    )
    return deleted


async def list_assets(
    db: AsyncSession, kind: AssetKind, book_id: str,
) -> Sequence[MarketingAsset | BookCover | LandingPage]:
    """All assets of one kind for a book, newest first."""
    model = model_for_kind(kind)
    result = await db.execute(
        select(model)
        .where(model.book_id == book_id)
        .order_by(model.created_at.desc()),
    )
    return result.scalars().all()
