"""Book ORM: a manuscript owned by exactly one user.

Invariants:
    - user_id is the owner; authorization compares it to the session identity
    - features and assets are scoped by book_id and removed with the book
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portal.db.base import Base, TABLE_PREFIX


class Book(Base):
    """Book aggregate root for features and marketing assets."""
    __tablename__ = f"{TABLE_PREFIX}book"

    id: Mapped[str] = mapped_column(
        String(255), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    user_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey(f"{TABLE_PREFIX}user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    cover_image_url: Mapped[str | None] = mapped_column(
        String(1000), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        onupdate=lambda: datetime.now(timezone.utc),
    )

    owner: Mapped["User"] = relationship("User", back_populates="books")
    features: Mapped[list["BookFeature"]] = relationship(
        "BookFeature", back_populates="book", cascade="all, delete-orphan",
    )
