"""Create the audit log table.

Revision ID: 001
Revises:
Create Date: 2026-10-19

Tables: query_history
"""

import sqlalchemy as sa
from alembic import op

revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create query_history."""
    op.create_table(
        "query_history",
        sa.Column("id", sa.BigInteger, sa.Identity(always=False), primary_key=True),
        sa.Column("operation", sa.String(16), nullable=False),
        sa.Column("success", sa.Boolean, nullable=False),
        sa.Column("timestamp", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("details", sa.Text),
        sa.CheckConstraint(
            "operation IN ('INSERT', 'SELECT', 'UPDATE', 'DELETE')",
            name="ck_query_history_operation",
        ),
    )
    op.create_index(
        "idx_query_history_timestamp",
        "query_history",
        [sa.text("timestamp DESC")],
    )
    op.create_index(
        "idx_query_history_operation",
        "query_history",
        ["operation", "success"],
    )


def downgrade() -> None:
    """Drop query_history."""
    op.drop_table("query_history")
