"""
Phonebook Backend — Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract.
How:   FastAPI uses these models to parse request bodies, serialize
       responses and generate the OpenAPI document.

Schemas are separate from the SQLAlchemy model: both stores return
`Contact`, whatever they keep internally.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Domain / Response Models
# ══════════════════════════════════════════════════════════════════════════


class Contact(BaseModel):
    """
    What:  A phonebook record as stores return it and the API serializes it.
    Who:   Returned by GET /api/persons, GET /api/persons/{id}, POST /api/persons.
    """
    id: int = Field(description="Store-assigned identifier")
    name: str = Field(description="Unique contact name")
    number: str = Field(description="Free-form phone number")

    model_config = {"from_attributes": True}


class InfoSnapshot(BaseModel):
    """Contact count and server time, rendered by GET /info."""
    count: int = Field(ge=0)
    generated_at: datetime


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class ContactCreate(BaseModel):
    """
    What:  Body of POST /api/persons.

    Both fields are optional at the schema level. Presence is checked by
    ContactService so that the error messages follow a fixed precedence
    ("name and number missing" before "name missing" before "number missing")
    instead of FastAPI's generic 422 list.
    """
    name: Optional[str] = Field(default=None, description="Contact name")
    number: Optional[str] = Field(default=None, description="Phone number")


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Error body for 400/500/503 responses.

    Example:
        {"error": "name must be unique"}
    """
    error: str = Field(description="Human-readable error message")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and store status.
    Who:   Returned by GET /health.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    store: str = Field(description="Store connectivity: connected, disconnected, in-memory")
    uptime_seconds: float = Field(description="Seconds since service started")
