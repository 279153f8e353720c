"""
Phonebook Backend — Contact Service (Business Logic)
======================================================

What:  Validation and lookup rules for phonebook contacts.
How:   Stateless; every method receives the ContactStore to work against.
Who:   Called by route handlers; calls the store.

Create Flow (POST /api/persons):
    ┌──────────┐    ┌────────────────┐    ┌──────────────┐    ┌──────────┐
    │  Body    │───▶│ Presence check │───▶│ Unique name  │───▶│  Store   │
    │  (Route) │    │ name / number  │    │ find_by_name │    │  create  │
    └──────────┘    └────────────────┘    └──────────────┘    └──────────┘

    The first failing check wins and raises ValidationError with the
    message returned to the client verbatim.
"""

import logging
from datetime import datetime
from typing import List, Optional, Tuple

from phonebook.exceptions import NotFoundError, ValidationError
from phonebook.schemas.contact import Contact, ContactCreate, InfoSnapshot
from phonebook.stores.base import ContactStore

logger = logging.getLogger(__name__)


class ContactService:
    """
    Business logic layer for contact operations.

    Responsibilities:
        - list_contacts(): everything the store holds
        - get_contact(): single lookup with not-found handling
        - create_contact(): presence and uniqueness validation, then insert
        - delete_contact(): idempotent removal
        - info(): count + server time for the info page

    Storage errors are not caught here; stores already raise them as
    DatabaseError / StoreUnavailableError.
    """

    async def list_contacts(self, store: ContactStore) -> List[Contact]:
        return await store.list_contacts()

    async def get_contact(self, store: ContactStore, contact_id: int) -> Contact:
        """
        Retrieve a single contact by id.

        Raises:
            NotFoundError: no contact has this id (→ 404, empty body)
        """
        contact = await store.get_contact(contact_id)
        if contact is None:
            raise NotFoundError(resource="person", resource_id=str(contact_id))
        return contact

    async def create_contact(
        self, store: ContactStore, payload: Optional[ContactCreate]
    ) -> Contact:
        """
        Validate and persist a new contact.

        A field counts as missing when it is absent, null or an empty string.
        The duplicate check is an exact, case-sensitive comparison.

        Raises:
            ValidationError: one of
                "name and number missing", "name missing",
                "number missing", "name must be unique"
        """
        name, number = self.validate_presence(payload)

        if await store.find_by_name(name) is not None:
            logger.info("Rejected duplicate name: %s", name)
            raise ValidationError(message="name must be unique", field="name")

        return await store.create_contact(name=name, number=number)

    async def delete_contact(self, store: ContactStore, contact_id: int) -> None:
        # Unknown ids are not an error
        await store.delete_contact(contact_id)

    async def info(self, store: ContactStore) -> InfoSnapshot:
        count = await store.count_contacts()
        return InfoSnapshot(count=count, generated_at=datetime.now().astimezone())

    @staticmethod
    def validate_presence(payload: Optional[ContactCreate]) -> Tuple[str, str]:
        """Return (name, number) or raise the first applicable ValidationError."""
        name = payload.name if payload else None
        number = payload.number if payload else None

        if not name and not number:
            raise ValidationError(message="name and number missing")
        if not name:
            raise ValidationError(message="name missing", field="name")
        if not number:
            raise ValidationError(message="number missing", field="number")
        return name, number


# ── Singleton Instance ────────────────────────────────────────────────────
contact_service = ContactService()
