"""Asset Schemas: admin listings of marketing assets, covers and landing pages.

Invariants:
    - metadata_json is read from the ORM attribute and emitted as "metadata"
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_ORM_CONFIG = ConfigDict(
    alias_generator=to_camel, populate_by_name=True, from_attributes=True,
)


class _AssetBase(BaseModel):
    model_config = _ORM_CONFIG

    id: str
    book_id: str
    title: str | None = None
    metadata_json: str | None = Field(
        None, validation_alias="metadata_json", serialization_alias="metadata",
    )
    status: str
    viewed_at: datetime | None = None
    created_at: datetime
    updated_at: datetime


class MarketingAssetResponse(_AssetBase):
    asset_type: str
    description: str | None = None
    file_url: str | None = None
    thumbnail_url: str | None = None
    is_active: bool = False


class BookCoverResponse(_AssetBase):
    cover_type: str
    image_url: str | None = None
    thumbnail_url: str | None = None
    is_primary: bool = False


class LandingPageResponse(_AssetBase):
    slug: str
    headline: str | None = None
    subheadline: str | None = None
    description: str | None = None
    html_content: str | None = None
    custom_css: str | None = None
    is_published: bool = False
    published_at: datetime | None = None
    is_active: bool = False


class DeleteAssetResponse(BaseModel):
    success: bool = True
