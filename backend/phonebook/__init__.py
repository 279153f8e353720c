"""
Phonebook Backend — Application Package Initializer
====================================================

What: Marks the `phonebook` directory as a Python package.
Who:  Imported by uvicorn (`phonebook.main:app`), Alembic and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← validation, not-found
    ├─────────────────────────────────────┤
    │       Stores (Data Access)          │  ← ContactStore interface
    ├─────────────────────────────────────┤
    │   Models & Database (Persistence)   │  ← Async SQLAlchemy
    └─────────────────────────────────────┘

    Routes never touch a store implementation directly; they receive one
    through the `get_contact_store` dependency.
"""

__version__ = "1.0.0"
