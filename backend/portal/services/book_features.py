"""Book Feature Access: owner-checked reads of a book's feature rows.

Invariants:
    - Existence is checked before ownership: absent -> 404, not owned -> 403
    - Feature rows are only read after the ownership check passes
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portal.core.authorization import is_authorized
from portal.core.domain_types import AccessPolicy, FeatureType, Identity
from portal.core.errors import (
    ErrorContext, ForbiddenError, InvalidParameterError, ResourceNotFoundError,
)
from portal.models.book import Book
from portal.models.book_feature import BookFeature


def parse_feature_type(raw: str) -> FeatureType:
    """Parse the {featureType} path segment or raise a 400."""
    try:
        return FeatureType(raw)
    except ValueError:
        raise InvalidParameterError(
            "Invalid feature type", "featureType", code="INVALID_FEATURE_TYPE",
        )


async def get_owned_book(
    db: AsyncSession, book_id: str, identity: Identity,
) -> Book:
    """Load a book the identity owns, or raise 404 / 403 in that order."""
    book = await db.get(Book, book_id)
    if book is None:
        raise ResourceNotFoundError("Book", book_id)
    if not is_authorized(identity, book, AccessPolicy.OWNER_ONLY):
        raise ForbiddenError(
            context=ErrorContext(user_id=identity.id, book_id=book_id),
        )
    return book


async def list_features(db: AsyncSession, book_id: str) -> Sequence[BookFeature]:
    result = await db.execute(
        select(BookFeature)
        .where(BookFeature.book_id == book_id)
        .order_by(BookFeature.created_at),
    )
    return result.scalars().all()


async def get_feature(
    db: AsyncSession, book_id: str, feature_type: str,
) -> BookFeature | None:
    result = await db.execute(
        select(BookFeature).where(
            BookFeature.book_id == book_id,
            BookFeature.feature_type == feature_type,
        ),
    )
    return result.scalar_one_or_none()
