"""Book Features: owner-only feature status reads and purchases.

Invariants:
    - 401 without identity, 404 for an unknown book, 403 for a book owned by
      someone else, in that order, on every route here
    - Feature rows are never read for a caller who fails the ownership check
    - GET of a single feature answers any type string; no row -> locked default
    - POST validates the feature type after the ownership ladder (400)
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from portal.api.dependencies import require_identity
from portal.config import Settings, get_settings
from portal.core.domain_types import Identity
from portal.core.errors import DatabaseError, ErrorContext, PaymentRequiredError
from portal.infrastructure.database import get_db
from portal.schemas.book_feature import (
    BookFeatureResponse, DefaultFeatureStatus, FeatureUnlockResponse,
)
from portal.services.book_features import (
    get_feature, get_owned_book, list_features, parse_feature_type,
)
from portal.services.feature_purchase import price_for, unlock_feature

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/books", tags=["book-features"])


@router.get("/{book_id}/features", response_model=list[BookFeatureResponse])
async def list_book_features(
    book_id: str,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db),
):
    """Get all feature statuses for a book."""
    try:
        await get_owned_book(db, book_id, identity)
        return await list_features(db, book_id)
    except SQLAlchemyError as e:
        logger.error(
            f"Failed to get features: {e}", exc_info=True,
            extra={"book_id": book_id},
        )
        raise DatabaseError("Failed to get features", "select")


@router.get(
    "/{book_id}/features/{feature_type}",
    response_model=BookFeatureResponse | DefaultFeatureStatus,
)
async def get_book_feature(
    book_id: str,
    feature_type: str,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db),
):
    """Get one feature's status, defaulting to locked when no row exists."""
    try:
        await get_owned_book(db, book_id, identity)
        feature = await get_feature(db, book_id, feature_type)
    except SQLAlchemyError as e:
        logger.error(
            f"Failed to get feature status: {e}", exc_info=True,
            extra={"book_id": book_id, "feature_type": feature_type},
        )
        raise DatabaseError("Failed to get feature status", "select")
    if feature is None:
        return DefaultFeatureStatus(feature_type=feature_type, book_id=book_id)
    return feature


@router.post(
    "/{book_id}/features/{feature_type}", response_model=FeatureUnlockResponse,
)
async def purchase_book_feature(
    book_id: str,
    feature_type: str,
    identity: Identity = Depends(require_identity),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Unlock a feature. Paid features go to checkout when Stripe is configured."""
    try:
        await get_owned_book(db, book_id, identity)
    except SQLAlchemyError as e:
        logger.error(
            f"Failed to unlock feature: {e}", exc_info=True,
            extra={"book_id": book_id},
        )
        raise DatabaseError("Failed to unlock feature", "select")

    kind = parse_feature_type(feature_type)
    price = price_for(kind)
    if price > 0 and settings.use_stripe:
        raise PaymentRequiredError(
            price, context=ErrorContext(user_id=identity.id, book_id=book_id),
        )

    try:
        result = await unlock_feature(db, book_id, identity.id, kind)
    except SQLAlchemyError as e:
        logger.error(
            f"Failed to unlock feature: {e}", exc_info=True,
            extra={"book_id": book_id, "feature_type": kind.value},
        )
        raise DatabaseError("Failed to unlock feature", "insert")

    message = (
        "Feature already unlocked" if result.already_unlocked
        else "Feature unlocked successfully"
    )
    return FeatureUnlockResponse(
        message=message, feature=BookFeatureResponse.model_validate(result.feature),
    )
