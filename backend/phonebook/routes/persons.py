"""
Phonebook Backend — Persons Route Handlers
============================================

What:  CRUD endpoints under /api/persons.
How:   Extracts path parameters and body, delegates to ContactService,
       returns JSON. Errors are raised as exceptions and turned into
       responses by the handlers registered in main.py.

Endpoints:
    GET    /api/persons        → 200 [Contact]
    GET    /api/persons/{id}   → 200 Contact | 404 empty
    DELETE /api/persons/{id}   → 204 empty
    POST   /api/persons        → 200 Contact | 400 {"error": ...}
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Response, status

from phonebook.models.person import MAX_CONTACT_ID, MIN_CONTACT_ID
from phonebook.schemas.contact import Contact, ContactCreate, ErrorResponse
from phonebook.services.contact_service import contact_service
from phonebook.stores import ContactStore, get_contact_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Persons"])


@router.get(
    "/persons",
    response_model=List[Contact],
    summary="List all contacts",
)
async def list_persons(
    store: ContactStore = Depends(get_contact_store),
) -> List[Contact]:
    return await contact_service.list_contacts(store)


@router.get(
    "/persons/{contact_id}",
    response_model=Contact,
    responses={
        404: {"description": "No contact with this id (empty body)"},
        400: {"description": "Id is not an integer in the id column's range", "model": ErrorResponse},
    },
    summary="Get a single contact by id",
)
async def get_person(
    contact_id: int = Path(ge=MIN_CONTACT_ID, le=MAX_CONTACT_ID),
    store: ContactStore = Depends(get_contact_store),
) -> Contact:
    return await contact_service.get_contact(store, contact_id)


@router.delete(
    "/persons/{contact_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a contact",
    description=(
        "Succeeds with 204 whether or not the contact existed. "
        "An id that is not an integer in the id column's range is a 400."
    ),
)
async def delete_person(
    contact_id: int = Path(ge=MIN_CONTACT_ID, le=MAX_CONTACT_ID),
    store: ContactStore = Depends(get_contact_store),
) -> Response:
    await contact_service.delete_contact(store, contact_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/persons",
    response_model=Contact,
    responses={400: {"description": "Validation failed", "model": ErrorResponse}},
    summary="Create a contact",
)
async def create_person(
    payload: Optional[ContactCreate] = None,
    store: ContactStore = Depends(get_contact_store),
) -> Contact:
    """
    Create a contact from `{name, number}`.

    Responds 200 (not 201) with the stored contact; existing clients
    check for 200.
    """
    return await contact_service.create_contact(store, payload)
