"""Initial schema: users, sessions, books, features and the three asset tables.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_P = "getlostportal_"


def _id() -> sa.Column:
    return sa.Column("id", sa.String(255), primary_key=True)


def _book_fk() -> sa.Column:
    return sa.Column(
        "book_id", sa.String(255),
        sa.ForeignKey(f"{_P}book.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        f"{_P}user",
        _id(),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("role", sa.String(50), nullable=False, server_default="user"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index(
        f"ix_{_P}user_email", f"{_P}user", ["email"], unique=True,
    )

    op.create_table(
        f"{_P}session",
        _id(),
        sa.Column("token", sa.String(255), nullable=False),
        sa.Column(
            "user_id", sa.String(255),
            sa.ForeignKey(f"{_P}user.id", ondelete="CASCADE"),
            nullable=False, index=True,
        ),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index(
        f"ix_{_P}session_token", f"{_P}session", ["token"], unique=True,
    )

    op.create_table(
        f"{_P}book",
        _id(),
        sa.Column(
            "user_id", sa.String(255),
            sa.ForeignKey(f"{_P}user.id", ondelete="CASCADE"),
            nullable=False, index=True,
        ),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("cover_image_url", sa.String(1000), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        f"{_P}book_feature",
        _id(),
        _book_fk(),
        sa.Column("feature_type", sa.String(50), nullable=False),
        sa.Column("status", sa.String(50), nullable=False, server_default="locked"),
        sa.Column("unlocked_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("purchased_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("price", sa.Integer, nullable=True),
        *_timestamps(),
        sa.UniqueConstraint("book_id", "feature_type", name="feature_book_type_idx"),
    )

    op.create_table(
        f"{_P}marketing_asset",
        _id(),
        _book_fk(),
        sa.Column("asset_type", sa.String(50), nullable=False),
        sa.Column("title", sa.String(500), nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("file_url", sa.String(1000), nullable=True),
        sa.Column("thumbnail_url", sa.String(1000), nullable=True),
        sa.Column("metadata", sa.Text, nullable=True),
        sa.Column("status", sa.String(50), nullable=False, server_default="pending"),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("viewed_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        f"{_P}book_cover",
        _id(),
        _book_fk(),
        sa.Column("cover_type", sa.String(50), nullable=False),
        sa.Column("title", sa.String(500), nullable=True),
        sa.Column("image_url", sa.String(1000), nullable=True),
        sa.Column("thumbnail_url", sa.String(1000), nullable=True),
        sa.Column("metadata", sa.Text, nullable=True),
        sa.Column("is_primary", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("status", sa.String(50), nullable=False, server_default="pending"),
        sa.Column("viewed_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        f"{_P}landing_page",
        _id(),
        _book_fk(),
        sa.Column("slug", sa.String(255), nullable=False, unique=True),
        sa.Column("title", sa.String(500), nullable=True),
        sa.Column("headline", sa.Text, nullable=True),
        sa.Column("subheadline", sa.Text, nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("html_content", sa.Text, nullable=True),
        sa.Column("custom_css", sa.Text, nullable=True),
        sa.Column("metadata", sa.Text, nullable=True),
        sa.Column("is_published", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("status", sa.String(50), nullable=False, server_default="draft"),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("viewed_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )


def downgrade() -> None:
    for table in (
        "landing_page", "book_cover", "marketing_asset",
        "book_feature", "book", "session",
    ):
        op.drop_table(f"{_P}{table}")
    op.drop_index(f"ix_{_P}user_email", table_name=f"{_P}user")
    op.drop_table(f"{_P}user")
