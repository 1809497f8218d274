"""Tag schemas for API request/response models."""

from uuid import UUID

from pydantic import BaseModel, Field


class TagCreateRequest(BaseModel):
    """Request schema for creating a tag. The colour is assigned automatically."""

    name: str = Field(..., description="Tag name (at most 60 characters, unique)")


class TagUpdateRequest(BaseModel):
    """Request schema for renaming a tag."""

    name: str = Field(..., description="New tag name")


class TagResponse(BaseModel):
    """Response schema for a tag."""

    id: UUID
    name: str
    color: str = Field(description="Hex colour, e.g. #6366f1")
