"""
Phonebook Backend — Abstract Contact Store Interface
======================================================

What:  Abstract base class defining the data-access contract for contacts.
How:   Concrete stores inherit from ContactStore and implement every
       coroutine below. Handlers receive a store through the
       `get_contact_store` dependency and never know which one it is.
Who:   Called by ContactService.

Implementations:
    - SqlContactStore:    SQLAlchemy AsyncSession over DATABASE_URL
    - MemoryContactStore: process-local list, lost on restart; also the
                          test double for route and service tests
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from phonebook.schemas.contact import Contact


class ContactStore(ABC):
    """
    Abstract interface over the collection of contacts.

    Contract:
        - ids are assigned by the store in create_contact() and never change
        - get_contact() / find_by_name() return None for a missing contact
        - delete_contact() is a no-op for an unknown id
        - implementation-specific failures are raised as DatabaseError or
          StoreUnavailableError, never as driver exceptions
    """

    @abstractmethod
    async def list_contacts(self) -> List[Contact]:
        """Return every contact, in store order."""
        ...

    @abstractmethod
    async def get_contact(self, contact_id: int) -> Optional[Contact]:
        ...

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Contact]:
        """Return the contact whose name equals `name` exactly, if any."""
        ...

    @abstractmethod
    async def create_contact(self, name: str, number: str) -> Contact:
        """
        Persist a new contact and return it with its assigned id.

        Raises:
            ValidationError: the store itself rejected a duplicate name
        """
        ...

    @abstractmethod
    async def delete_contact(self, contact_id: int) -> None:
        ...

    @abstractmethod
    async def count_contacts(self) -> int:
        ...

    @abstractmethod
    async def ping(self) -> bool:
        """Lightweight reachability check used by GET /health."""
        ...

    @property
    @abstractmethod
    def backend_name(self) -> str:
        """Short identifier for logs and health output."""
        ...
