"""System Book Assets: admin listing and deletion of a book's assets.

Invariants:
    - Admin only; no ownership check on these routes
    - {assetType} is parsed into AssetKind before any query; unknown -> 400
    - Deletion is scoped to the book in the path and is idempotent: an asset
      id addressed under another book is left in place and the response is
      still {"success": true}
    - Database failures are logged here and returned as a generic 500
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from portal.api.dependencies import require_admin
from portal.core.domain_types import AssetKind, Identity
from portal.core.errors import DatabaseError
from portal.infrastructure.database import get_db
from portal.schemas.asset import (
    BookCoverResponse, DeleteAssetResponse, LandingPageResponse,
    MarketingAssetResponse,
)
from portal.services.asset_registry import delete_asset, list_assets, parse_asset_kind

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/admin/system-books", tags=["admin-assets"])

_RESPONSE_SCHEMAS = {
    AssetKind.MARKETING_ASSETS: MarketingAssetResponse,
    AssetKind.COVERS: BookCoverResponse,
    AssetKind.LANDING_PAGE: LandingPageResponse,
}


@router.get("/{book_id}/assets/{asset_type}")
async def list_book_assets(
    book_id: str,
    asset_type: str,
    _admin: Identity = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """List one kind of asset for a book, newest first."""
    kind = parse_asset_kind(asset_type)
    try:
        rows = await list_assets(db, kind, book_id)
    except SQLAlchemyError as e:
        logger.error(
            f"Failed to list assets: {e}", exc_info=True,
            extra={"book_id": book_id, "asset_type": kind.value},
        )
        raise DatabaseError("Failed to list assets", "select")
    schema = _RESPONSE_SCHEMAS[kind]
    return [
        schema.model_validate(row).model_dump(mode="json", by_alias=True)
        for row in rows
    ]


@router.delete(
    "/{book_id}/assets/{asset_type}/{asset_id}",
    response_model=DeleteAssetResponse,
)
async def delete_book_asset(
    book_id: str,
    asset_type: str,
    asset_id: str,
    _admin: Identity = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Delete an asset of this book.

    Matches on (book_id, asset_id). An id that belongs to a different book, or
    to no book, deletes nothing and still returns success.
    """
    kind = parse_asset_kind(asset_type)
    try:
        await delete_asset(db, kind, book_id, asset_id)
    except SQLAlchemyError as e:
        logger.error(
            f"Failed to delete asset: {e}", exc_info=True,
            extra={"book_id": book_id, "asset_type": kind.value, "asset_id": asset_id},
        )
        raise DatabaseError("Failed to delete asset", "delete")
    return DeleteAssetResponse(success=True)
