"""Create persons table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `persons` table holding phonebook contacts.
How:   Integer autoincrement id, unique name, free-form number.

Rollback: downgrade() drops the table (all contacts are lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """See phonebook/models/person.py for the column definitions."""
    op.create_table(
        "persons",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "name",
            sa.String(255),
            nullable=False,
            comment="Contact name, unique across the phonebook",
        ),
        sa.Column(
            "number",
            sa.String(64),
            nullable=False,
            comment="Free-form phone number",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_persons_name"),
        sqlite_autoincrement=True,
    )


def downgrade() -> None:
    op.drop_table("persons")
