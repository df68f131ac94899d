"""Create user and subscribe tables

Revision ID: 5c2e8d41a7b3
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5c2e8d41a7b3"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "user_table",
        sa.Column("user_id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("mobileno", sa.String(32), nullable=False),
        sa.Column("emailid", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
    )
    op.create_index("ix_user_table_user_id", "user_table", ["user_id"])
    # Unique index backs signup against concurrent duplicate emails
    op.create_index("ix_user_table_emailid", "user_table", ["emailid"], unique=True)

    op.create_table(
        "subscribe_table",
        sa.Column("subscribe_id", sa.Integer(), primary_key=True),
        sa.Column("emailid", sa.String(255), nullable=False),
        sa.Column("subscribers", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    )
    op.create_index("ix_subscribe_table_subscribe_id", "subscribe_table", ["subscribe_id"])
    op.create_index("ix_subscribe_table_emailid", "subscribe_table", ["emailid"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_subscribe_table_emailid", table_name="subscribe_table")
    op.drop_index("ix_subscribe_table_subscribe_id", table_name="subscribe_table")
    op.drop_table("subscribe_table")
    op.drop_index("ix_user_table_emailid", table_name="user_table")
    op.drop_index("ix_user_table_user_id", table_name="user_table")
    op.drop_table("user_table")
