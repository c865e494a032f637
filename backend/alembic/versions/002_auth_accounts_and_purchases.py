"""Auth account/verification tables and feature purchases.

Revision ID: 002_auth_purchases
Revises: 001_initial
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002_auth_purchases"
down_revision: Union[str, None] = "001_initial"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_P = "getlostportal_"


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        f"{_P}account",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("account_id", sa.String(255), nullable=False),
        sa.Column("provider_id", sa.String(255), nullable=False),
        sa.Column(
            "user_id", sa.String(255),
            sa.ForeignKey(f"{_P}user.id", ondelete="CASCADE"),
            nullable=False, index=True,
        ),
        sa.Column("access_token", sa.Text, nullable=True),
        sa.Column("refresh_token", sa.Text, nullable=True),
        sa.Column("id_token", sa.Text, nullable=True),
        sa.Column("access_token_expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("refresh_token_expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("scope", sa.String(255), nullable=True),
        sa.Column("password", sa.String(255), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        f"{_P}verification",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column("identifier", sa.String(255), nullable=False),
        sa.Column("value", sa.String(255), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        f"{_P}purchase",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column(
            "user_id", sa.String(255), sa.ForeignKey(f"{_P}user.id"),
            nullable=False, index=True,
        ),
        sa.Column(
            "book_id", sa.String(255),
            sa.ForeignKey(f"{_P}book.id", ondelete="CASCADE"),
            nullable=False, index=True,
        ),
        sa.Column("feature_type", sa.String(50), nullable=False, index=True),
        sa.Column("amount", sa.Integer, nullable=False),
        sa.Column("currency", sa.String(10), nullable=False, server_default="USD"),
        sa.Column("payment_method", sa.String(50), nullable=True),
        sa.Column("payment_intent_id", sa.String(255), nullable=True),
        sa.Column(
            "status", sa.String(50), nullable=False,
            server_default="pending", index=True,
        ),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )


def downgrade() -> None:
    for table in ("purchase", "verification", "account"):
        op.drop_table(f"{_P}{table}")
