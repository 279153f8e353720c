"""
Phonebook Backend — In-Memory Contact Store
=============================================

What:  ContactStore over a process-local list of contacts.
Who:   Served when STORE_BACKEND=memory; also the store used by the test suite.

Contents do not survive a restart. There is no locking: no method awaits
between reading and writing `_contacts`, so each call runs to completion on
the event loop before another request can observe the list.

Id allocation:
    Ids come from a monotonic counter seeded past the highest id present,
    so a deleted id is never handed out again within the process.
"""

import logging
from typing import Iterable, List, Optional

from phonebook.schemas.contact import Contact
from phonebook.stores.base import ContactStore

logger = logging.getLogger(__name__)

DEFAULT_CONTACTS = [
    {"id": 1, "name": "Arto Hellas", "number": "040-123456"},
    {"id": 2, "name": "Ada Lovelace", "number": "39-44-5323523"},
    {"id": 3, "name": "Dan Abramov", "number": "12-43-234345"},
    {"id": 4, "name": "Mary Poppendieck", "number": "39-23-6423122"},
]


class MemoryContactStore(ContactStore):
    """ContactStore over a Python list, in insertion order."""

    def __init__(self, seed: Optional[Iterable[dict]] = None):
        self._contacts: List[Contact] = [Contact.model_validate(item) for item in (seed or [])]
        self._next_id = max((c.id for c in self._contacts), default=0) + 1

    @property
    def backend_name(self) -> str:
        return "memory"

    async def list_contacts(self) -> List[Contact]:
        return [c.model_copy() for c in self._contacts]

    async def get_contact(self, contact_id: int) -> Optional[Contact]:
        for contact in self._contacts:
            if contact.id == contact_id:
                return contact.model_copy()
        return None

    async def find_by_name(self, name: str) -> Optional[Contact]:
        for contact in self._contacts:
            if contact.name == name:
                return contact.model_copy()
        return None

    async def create_contact(self, name: str, number: str) -> Contact:
        contact = Contact(id=self._allocate_id(), name=name, number=number)
        self._contacts.append(contact)
        logger.info("Person %s created (memory)", contact.id)
        return contact.model_copy()

    async def delete_contact(self, contact_id: int) -> None:
        self._contacts = [c for c in self._contacts if c.id != contact_id]

    async def count_contacts(self) -> int:
        return len(self._contacts)

    async def ping(self) -> bool:
        return True

    def _allocate_id(self) -> int:
        in_use = {c.id for c in self._contacts}
        while self._next_id in in_use:
            self._next_id += 1
        allocated = self._next_id
        self._next_id += 1
        return allocated
