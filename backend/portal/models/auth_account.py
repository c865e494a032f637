"""Auth provider ORMs: linked credential accounts and verification values.

Both tables are written by the sign-in flow; the API only reports on them
(GET /api/auth/test-db).
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from portal.db.base import Base, TABLE_PREFIX


def _new_id() -> str:
    return str(uuid.uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Account(Base):
    """Credential or OAuth account linked to a user."""
    __tablename__ = f"{TABLE_PREFIX}account"

    id: Mapped[str] = mapped_column(String(255), primary_key=True, default=_new_id)
    account_id: Mapped[str] = mapped_column(String(255), nullable=False)
    provider_id: Mapped[str] = mapped_column(String(255), nullable=False)
    user_id: Mapped[str] = mapped_column(
        String(255),
        ForeignKey(f"{TABLE_PREFIX}user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    access_token: Mapped[str | None] = mapped_column(Text, nullable=True)
    refresh_token: Mapped[str | None] = mapped_column(Text, nullable=True)
    id_token: Mapped[str | None] = mapped_column(Text, nullable=True)
    access_token_expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    refresh_token_expires_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    scope: Mapped[str | None] = mapped_column(String(255), nullable=True)
    # Password hash for email/password sign-in
    password: Mapped[str | None] = mapped_column(String(255), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now, onupdate=_now,
    )


class Verification(Base):
    """Email verification or password reset value with an expiry."""
    __tablename__ = f"{TABLE_PREFIX}verification"

    id: Mapped[str] = mapped_column(String(255), primary_key=True, default=_new_id)
    identifier: Mapped[str] = mapped_column(String(255), nullable=False)
    value: Mapped[str] = mapped_column(String(255), nullable=False)
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_now, onupdate=_now,
    )
