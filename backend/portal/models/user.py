"""User ORM: account identity and role.

Invariants:
    - email is unique and non-null
    - role is "user" or "admin" (UserRole); promotion happens via make-admin
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship

from portal.core.domain_types import UserRole
from portal.db.base import Base, TABLE_PREFIX


class User(Base):
    """Portal account."""
    __tablename__ = f"{TABLE_PREFIX}user"

    id: Mapped[str] = mapped_column(
        String(255), primary_key=True, default=lambda: str(uuid.uuid4()),
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    role: Mapped[str] = mapped_column(
        String(50), nullable=False, default=UserRole.STANDARD.value,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    books: Mapped[list["Book"]] = relationship(
        "Book", back_populates="owner", cascade="all, delete-orphan",
    )
    sessions: Mapped[list["AuthSession"]] = relationship(
        "AuthSession", back_populates="user", cascade="all, delete-orphan",
    )
