"""Purchase ORM: payment record written when a feature is unlocked.

Invariants:
    - amount is in cents; currency defaults to USD
    - Simulated purchases are written already "completed" with completed_at set
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from portal.db.base import Base, TABLE_PREFIX


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Purchase(Base):
    """One feature purchase by a user for a book."""
    __tablename__ = f"{TABLE_PREFIX}purchase"

    id: Mapped[str] = mapped_column(
        String(255), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    user_id: Mapped[str] = mapped_column(
        String(255), ForeignKey(f"{TABLE_PREFIX}user.id"), nullable=False, index=True,
    )
    book_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey(f"{TABLE_PREFIX}book.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    feature_type: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    currency: Mapped[str] = mapped_column(String(10), nullable=False, default="USD")
    payment_method: Mapped[str | None] = mapped_column(String(50), nullable=True)
    payment_intent_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[str] = mapped_column(
        String(50), nullable=False, default="pending", index=True,
    )
    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now, onupdate=_now,
    )
