"""
Phonebook Backend — Contact Stores
====================================

`get_contact_store` is the FastAPI dependency every route uses to reach the
data. It picks the implementation from `settings.store_backend`:

    database → a SqlContactStore bound to a fresh AsyncSession per request
    memory   → the process-wide MemoryContactStore below

Tests replace it through `app.dependency_overrides[get_contact_store]`.
"""

from typing import AsyncGenerator

from phonebook.config import settings
from phonebook.database import async_session_factory
from phonebook.stores.base import ContactStore
from phonebook.stores.memory_store import DEFAULT_CONTACTS, MemoryContactStore
from phonebook.stores.sql_store import SqlContactStore

memory_store = MemoryContactStore(seed=DEFAULT_CONTACTS)


async def get_contact_store() -> AsyncGenerator[ContactStore, None]:
    if settings.store_backend == "memory":
        yield memory_store
        return

    async with async_session_factory() as session:
        yield SqlContactStore(session)


__all__ = [
    "ContactStore",
    "MemoryContactStore",
    "SqlContactStore",
    "get_contact_store",
    "memory_store",
]
