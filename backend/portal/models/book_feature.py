"""BookFeature ORM: status of one purchasable capability for one book.

Invariants:
    - (book_id, feature_type) is unique
    - status defaults to "locked"; price is in cents
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portal.core.domain_types import FeatureStatus
from portal.db.base import Base, TABLE_PREFIX


class BookFeature(Base):
    """Per-book feature row."""
    __tablename__ = f"{TABLE_PREFIX}book_feature"
    __table_args__ = (
        UniqueConstraint("book_id", "feature_type", name="feature_book_type_idx"),
    )

    id: Mapped[str] = mapped_column(
        String(255), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    book_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey(f"{TABLE_PREFIX}book.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    feature_type: Mapped[str] = mapped_column(String(50), nullable=False)
    status: Mapped[str] = mapped_column(
        String(50), nullable=False, default=FeatureStatus.LOCKED.value,
    )
    unlocked_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    purchased_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    price: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    book: Mapped["Book"] = relationship("Book", back_populates="features")
