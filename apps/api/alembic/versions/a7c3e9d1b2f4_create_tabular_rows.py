"""create tabular_rows

Revision ID: a7c3e9d1b2f4
Revises:
Create Date: 2026-10-19 10:00:00.000000

This migration creates the tabular_rows table used when
TABULAR_BACKEND=database. Each row stores one spreadsheet-style row:
- table_name: logical table ("screening", "Enrollments", "user_log")
- cells: JSON array of cell strings in column order
- id: insertion order, which is the row order returned by scans
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "a7c3e9d1b2f4"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create tabular_rows with an index on table_name for per-table scans."""
    op.create_table(
        "tabular_rows",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("table_name", sa.String(length=100), nullable=False),
        sa.Column("cells", sa.JSON(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_tabular_rows_table_name", "tabular_rows", ["table_name"], unique=False)


def downgrade() -> None:
    """Drop tabular_rows."""
    op.drop_index("ix_tabular_rows_table_name", table_name="tabular_rows")
    op.drop_table("tabular_rows")
