"""
Phonebook Backend — Info Page Route
=====================================

GET /info returns a small HTML fragment with the number of stored contacts
and the server's local time, e.g.:

    <p>Phonebook has info for 4 people</p>
    <p>Mon Oct 19 2026 08:15:00 GMT+0000 (UTC)</p>
"""

from datetime import datetime

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from phonebook.services.contact_service import contact_service
from phonebook.stores import ContactStore, get_contact_store

router = APIRouter(tags=["Info"])


def format_server_time(moment: datetime) -> str:
    """
    Render a timezone-aware datetime in Date.toString() layout.

    The trailing zone is the abbreviation from %Z ("CEST"), not the long
    name a browser prints ("Central European Summer Time").
    """
    return moment.strftime("%a %b %d %Y %H:%M:%S GMT%z (%Z)")


@router.get("/info", response_class=HTMLResponse, summary="Phonebook summary page")
async def info_page(store: ContactStore = Depends(get_contact_store)) -> HTMLResponse:
    snapshot = await contact_service.info(store)
    body = (
        f"<p>Phonebook has info for {snapshot.count} people</p>\n"
        f"<p>{format_server_time(snapshot.generated_at)}</p>"
    )
    return HTMLResponse(content=body)
