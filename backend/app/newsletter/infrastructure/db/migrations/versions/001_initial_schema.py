"""Initial schema creation for the newsletter service.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

Creates the core tables:
- subscriptions: Registered subscribers and their status
- subscription_tokens: Confirmation tokens issued at registration
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create initial database schema."""
    # Create subscriptions table
    op.create_table(
        "subscriptions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("subscribed_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            "status",
            sa.Enum("pending_confirmation", "confirmed", name="subscription_status"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )
    op.create_index("ix_subscriptions_email", "subscriptions", ["email"], unique=True)

    # Create subscription_tokens table
    op.create_table(
        "subscription_tokens",
        sa.Column("subscription_token", sa.String(length=64), nullable=False),
        sa.Column("subscriber_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["subscriber_id"], ["subscriptions.id"]),
        sa.PrimaryKeyConstraint("subscription_token"),
    )
    op.create_index(
        "ix_subscription_tokens_subscriber_id",
        "subscription_tokens",
        ["subscriber_id"],
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index("ix_subscription_tokens_subscriber_id", table_name="subscription_tokens")
    op.drop_table("subscription_tokens")
    op.drop_index("ix_subscriptions_email", table_name="subscriptions")
    op.drop_table("subscriptions")
    sa.Enum(name="subscription_status").drop(op.get_bind(), checkfirst=True)
