"""Transaction schemas for API request/response models."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class TransactionCreateRequest(BaseModel):
    """Request schema for recording a transaction."""

    journal_id: UUID
    type: str = Field(..., description="'In' or 'Out' (case-insensitive)")
    amount: Decimal = Field(..., description="Positive amount, rounded to cents")
    occurred_at: datetime = Field(
        ...,
        description="When the money moved (naive values are treated as UTC)",
    )
    note: Optional[str] = Field(None, description="Free text, at most 500 characters")
    tag_ids: list[UUID] = Field(default_factory=list)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "journal_id": "550e8400-e29b-41d4-a716-446655440000",
                "type": "Out",
                "amount": "45.99",
                "occurred_at": "2026-01-12T12:00:00Z",
                "note": "Weekly groceries",
                "tag_ids": ["660e8400-e29b-41d4-a716-446655440001"],
            },
        },
    )


class TransactionUpdateRequest(BaseModel):
    """Request schema for updating a transaction.

    The journal cannot be changed; the tag list replaces the current tags.
    """

    type: str
    amount: Decimal
    occurred_at: datetime
    note: Optional[str] = None
    tag_ids: list[UUID] = Field(default_factory=list)


class TransactionTagResponse(BaseModel):
    """Tag as embedded in a transaction."""

    id: UUID
    name: str
    color: str


class TransactionResponse(BaseModel):
    """Response schema for a transaction with its journal and tags."""

    id: UUID
    journal_id: UUID
    journal_name: str
    currency: str
    type: str
    amount: Decimal
    occurred_at: datetime
    note: Optional[str] = None
    tags: list[TransactionTagResponse]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "770e8400-e29b-41d4-a716-446655440002",
                "journal_id": "550e8400-e29b-41d4-a716-446655440000",
                "journal_name": "Personal Budget",
                "currency": "USD",
                "type": "Out",
                "amount": "45.99",
                "occurred_at": "2026-01-12T12:00:00Z",
                "note": "Weekly groceries",
                "tags": [
                    {
                        "id": "660e8400-e29b-41d4-a716-446655440001",
                        "name": "Groceries",
                        "color": "#84cc16",
                    },
                ],
            },
        },
    )
