"""Journal schemas for API request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class JournalCreateRequest(BaseModel):
    """Request schema for creating a journal.

    Length and format rules are enforced by the domain so that violations
    come back as 400 responses with an error code.
    """

    name: str = Field(..., description="Display name (at most 100 characters)")
    primary_currency: str = Field(..., description="3-letter currency code")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "Personal Budget", "primary_currency": "USD"},
        },
    )


class JournalUpdateRequest(BaseModel):
    """Request schema for renaming a journal."""

    name: str = Field(..., description="New display name")


class JournalResponse(BaseModel):
    """Response schema for a journal."""

    id: UUID
    name: str
    primary_currency: str
    is_closed: bool
    created_at: datetime

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "550e8400-e29b-41d4-a716-446655440000",
                "name": "Personal Budget",
                "primary_currency": "USD",
                "is_closed": False,
                "created_at": "2026-01-05T09:30:00Z",
            },
        },
    )
