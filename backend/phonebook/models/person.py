"""
Phonebook Backend — Person SQLAlchemy Model
=============================================

What:  ORM model representing the `persons` table.
Who:   Used by SqlContactStore for CRUD operations and by Alembic.

Table Design:
    - Integer autoincrement primary key: the store assigns ids, clients
      address contacts as /api/persons/{id}
    - name: unique; the service checks first, the constraint catches races
    - number: free-form text, no format validation
"""

from sqlalchemy import Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from phonebook.database import Base

# Range of the INTEGER id column (32-bit on PostgreSQL)
MIN_CONTACT_ID = -(2**31)
MAX_CONTACT_ID = 2**31 - 1


class Person(Base):
    """
    A phonebook entry.

    Lifecycle:
        1. Inserted by POST /api/persons after validation
        2. Read by GET /api/persons and GET /api/persons/{id}
        3. Deleted by DELETE /api/persons/{id}
        There is no update path; rows are immutable while they exist.
    """

    __tablename__ = "persons"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    # Case-sensitive exact match; no trimming or case folding
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Contact name, unique across the phonebook",
    )

    number: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        comment="Free-form phone number",
    )

    __table_args__ = (
        UniqueConstraint("name", name="uq_persons_name"),
        # AUTOINCREMENT on SQLite: ids of deleted rows are never handed out again
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"<Person(id={self.id}, name='{self.name}')>"
