"""create stored_records table

Revision ID: 20261018_0001
Revises:
Create Date: 2026-10-18 00:00:00
"""

import sqlalchemy as sa
from alembic import context, op

# revision identifiers, used by Alembic.
revision = "20261018_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # The app creates this table at startup, so a database may already have it
    if not context.is_offline_mode() and "stored_records" in sa.inspect(op.get_bind()).get_table_names():
        return

    op.create_table(
        "stored_records",
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("payload", sa.Text(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("name"),
    )


def downgrade() -> None:
    op.drop_table("stored_records")
