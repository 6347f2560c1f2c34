"""Create student and foods tables

Revision ID: 001
Revises: None
Create Date: 2024-01-15 00:00:00.000000+00:00

What:  Creates `student` (keyed on CLASS, SECTION, ROLLID) and the read-only
       `foods` catalog table.
Note:  `orders` is owned outside this service and is not created here.
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "student",
        sa.Column("NAME", sa.String(30), nullable=False),
        sa.Column("TITLE", sa.String(25), nullable=False),
        sa.Column("CLASS", sa.String(5), nullable=False),
        sa.Column("SECTION", sa.String(1), nullable=False),
        sa.Column("ROLLID", sa.SmallInteger(), nullable=False, autoincrement=False),
        # Duplicate identities are rejected here, not by the service
        sa.PrimaryKeyConstraint("CLASS", "SECTION", "ROLLID"),
    )

    op.create_table(
        "foods",
        sa.Column("ITEM_ID", sa.String(20), nullable=False),
        sa.Column("ITEM_NAME", sa.String(50), nullable=False),
        sa.Column("ITEM_UNIT", sa.String(10), nullable=False),
        sa.Column("COMPANY_ID", sa.String(20), nullable=False),
        sa.PrimaryKeyConstraint("ITEM_ID"),
    )


def downgrade() -> None:
    """Destructive: drops both tables and their data."""
    op.drop_table("foods")
    op.drop_table("student")
