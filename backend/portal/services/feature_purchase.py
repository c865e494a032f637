"""Feature Purchase: unlock a book feature with a simulated, completed payment.

Invariants:
    - A feature whose row is not "locked" is returned untouched (no purchase row)
    - Every unlock writes one completed Purchase and leaves the feature
      "purchased" with unlocked_at, purchased_at and price set
    - Purchase and feature change commit together
    - Prices are in cents; the summary is free

Design Decisions:
    - "purchased" (not "unlocked") marks the deliverable as requested; an
      admin upload moves it on
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from portal.core.domain_types import FeatureStatus, FeatureType
from portal.models.book_feature import BookFeature
from portal.models.purchase import Purchase
from portal.services.book_features import get_feature

logger = logging.getLogger(__name__)

FEATURE_PRICES: dict[FeatureType, int] = {
    FeatureType.SUMMARY: 0,
    FeatureType.MANUSCRIPT_REPORT: 14999,
    FeatureType.MARKETING_ASSETS: 14999,
    FeatureType.BOOK_COVERS: 14999,
    FeatureType.LANDING_PAGE: 14999,
}


@dataclass
class UnlockResult:
    feature: BookFeature
    already_unlocked: bool


def price_for(feature_type: FeatureType) -> int:
    return FEATURE_PRICES.get(feature_type, 0)


async def unlock_feature(
    db: AsyncSession, book_id: str, user_id: str, feature_type: FeatureType,
) -> UnlockResult:
    """Record a completed simulated purchase and mark the feature purchased."""
    existing = await get_feature(db, book_id, feature_type.value)
    if existing is not None and existing.status != FeatureStatus.LOCKED.value:
        return UnlockResult(existing, already_unlocked=True)

    price = price_for(feature_type)
    now = datetime.now(timezone.utc)
    db.add(Purchase(
        user_id=user_id,
        book_id=book_id,
        feature_type=feature_type.value,
        amount=price,
        currency="USD",
        payment_method="simulated",
        status="completed",
        completed_at=now,
    ))

    feature = existing or BookFeature(book_id=book_id, feature_type=feature_type.value)
    feature.status = FeatureStatus.PURCHASED.value
    feature.unlocked_at = now
    feature.purchased_at = now
    feature.price = price
    if existing is None:
        db.add(feature)

    await db.commit()
    await db.refresh(feature)
    logger.info(
        "Feature purchased",
        extra={"user_id": user_id, "book_id": book_id, "feature_type": feature_type.value},
    )
    return UnlockResult(feature, already_unlocked=False)
