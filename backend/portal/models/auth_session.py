"""AuthSession ORM: server-side session tokens issued at sign-in."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portal.db.base import Base, TABLE_PREFIX


class AuthSession(Base):
    """One signed-in browser or client. Expired rows resolve to no identity."""
    __tablename__ = f"{TABLE_PREFIX}session"

    id: Mapped[str] = mapped_column(
        String(255), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    token: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey(f"{TABLE_PREFIX}user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    user: Mapped["User"] = relationship(
        "User", back_populates="sessions", lazy="selectin",
    )
