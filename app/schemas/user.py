"""Pydantic schemas for User model validation."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserResponse(BaseModel):
    """Schema for user response (public data only)."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(
        ...,
        description="Unique user identifier",
    )
    email: EmailStr = Field(
        ...,
        description="User's email address",
        examples=["user@example.com"],
    )
    name: Optional[str] = Field(
        None,
        max_length=255,
        description="User's display name",
        examples=["John Doe"],
    )
    tenant_id: Optional[int] = Field(
        None,
        description="Tenant the user belongs to",
    )
    created_at: Optional[datetime] = Field(
        None,
        description="When the user was created",
    )
