"""
Pydantic models for user data.

Request schemas accept any string (or nothing) for ``name``.  Whether
a name is acceptable is decided by ``UserService`` so that every
rejection produces the same ``Name is required`` error body.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    name: Optional[str] = Field(None, examples=["Jane Smith"])


class UserCreate(UserBase):
    """Schema for creating a user."""


class UserUpdate(UserBase):
    """Schema for renaming an existing user."""


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    name: str

    # Allow construction from ``UserRecord`` dataclasses.
    model_config = {
        "from_attributes": True,
    }


class UserDeleted(BaseModel):
    """Response body of a successful deletion."""

    message: str = Field(..., examples=["User deleted successfully"])
    user: UserRead


class HealthStatus(BaseModel):
    op: str = Field(..., examples=["Success"])


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""

    error: str = Field(..., examples=["User not found"])
