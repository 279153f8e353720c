"""
Phonebook Backend — SQLAlchemy Contact Store
==============================================

What:  ContactStore backed by an async SQLAlchemy session.
How:   One instance wraps one AsyncSession for the lifetime of a request.
       Writes commit immediately; on failure the session is rolled back and
       the driver error is translated into the application hierarchy.

Error Translation:
    IntegrityError on insert            → ValidationError("name must be unique")
    Pool timeout / OperationalError /
    InterfaceError / asyncio timeout    → StoreUnavailableError (503)
    Any other SQLAlchemyError           → DatabaseError (500)
"""

import asyncio
import logging
from typing import List, NoReturn, Optional

from sqlalchemy import delete, func, select, text
from sqlalchemy.exc import (
    IntegrityError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
    TimeoutError as PoolTimeoutError,
)
from sqlalchemy.ext.asyncio import AsyncSession

from phonebook.exceptions import DatabaseError, StoreUnavailableError, ValidationError
from phonebook.models.person import Person
from phonebook.schemas.contact import Contact
from phonebook.stores.base import ContactStore

logger = logging.getLogger(__name__)

_UNAVAILABLE_ERRORS = (PoolTimeoutError, OperationalError, InterfaceError, asyncio.TimeoutError)


class SqlContactStore(ContactStore):
    """ContactStore over the `persons` table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    @property
    def backend_name(self) -> str:
        return "database"

    async def list_contacts(self) -> List[Contact]:
        try:
            result = await self.session.execute(select(Person).order_by(Person.id))
            return [Contact.model_validate(row) for row in result.scalars().all()]
        except Exception as e:
            self._raise_store_error(e, "list")

    async def get_contact(self, contact_id: int) -> Optional[Contact]:
        try:
            person = await self.session.get(Person, contact_id)
        except Exception as e:
            self._raise_store_error(e, "get", contact_id=contact_id)
        return Contact.model_validate(person) if person is not None else None

    async def find_by_name(self, name: str) -> Optional[Contact]:
        try:
            result = await self.session.execute(select(Person).where(Person.name == name))
            person = result.scalar_one_or_none()
        except Exception as e:
            self._raise_store_error(e, "find_by_name")
        return Contact.model_validate(person) if person is not None else None

    async def create_contact(self, name: str, number: str) -> Contact:
        person = Person(name=name, number=number)
        try:
            self.session.add(person)
            await self.session.flush()  # assigns person.id
            await self.session.commit()
        except IntegrityError as e:
            await self._rollback()
            logger.info("Insert rejected by unique constraint: %s", name)
            raise ValidationError(
                message="name must be unique",
                field="name",
                context={"constraint": "uq_persons_name", "driver_error": type(e.orig).__name__},
            )
        except Exception as e:
            await self._rollback()
            self._raise_store_error(e, "create")
        logger.info("Person %s created", person.id)
        return Contact.model_validate(person)

    async def delete_contact(self, contact_id: int) -> None:
        try:
            result = await self.session.execute(delete(Person).where(Person.id == contact_id))
            await self.session.commit()
        except Exception as e:
            await self._rollback()
            self._raise_store_error(e, "delete", contact_id=contact_id)
        if result.rowcount:
            logger.info("Person %s deleted", contact_id)

    async def count_contacts(self) -> int:
        try:
            result = await self.session.execute(select(func.count(Person.id)))
            return result.scalar() or 0
        except Exception as e:
            self._raise_store_error(e, "count")

    async def ping(self) -> bool:
        try:
            await self.session.execute(text("SELECT 1"))
        except Exception as e:
            logger.warning("Store ping failed: %s", str(e))
            return False
        return True

    # ── Internal Helpers ──────────────────────────────────────────────────

    async def _rollback(self) -> None:
        try:
            await self.session.rollback()
        except SQLAlchemyError:
            logger.error("Rollback failed", exc_info=True)

    @staticmethod
    def _raise_store_error(exc: Exception, operation: str, **context) -> NoReturn:
        """Translate a driver/ORM exception; anything else propagates untouched."""
        context["operation"] = operation
        context["error_type"] = type(exc).__name__
        if isinstance(exc, _UNAVAILABLE_ERRORS):
            logger.error("Store unavailable during %s: %s", operation, str(exc))
            raise StoreUnavailableError(context=context) from exc
        if isinstance(exc, SQLAlchemyError):
            logger.error("Database error during %s: %s", operation, str(exc), exc_info=True)
            raise DatabaseError(context=context) from exc
        raise exc
