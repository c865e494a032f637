"""Book Feature Schemas: feature rows and the implicit locked default."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from portal.core.domain_types import FeatureStatus


class BookFeatureResponse(BaseModel):
    """One persisted feature row."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: str
    book_id: str
    feature_type: str
    status: str
    unlocked_at: datetime | None = None
    purchased_at: datetime | None = None
    price: int | None = None
    created_at: datetime
    updated_at: datetime


class DefaultFeatureStatus(BaseModel):
    """Returned when a book has no row for the requested feature yet."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status: str = FeatureStatus.LOCKED.value
    feature_type: str
    book_id: str


class FeatureUnlockResponse(BaseModel):
    """Result of POST /api/books/{id}/features/{featureType}."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str
    feature: BookFeatureResponse
