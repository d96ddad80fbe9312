"""User request/response schemas.

The password is write-only: it appears on the create/update bodies and
never on UserResponse.
"""

import uuid
from datetime import datetime
from typing import Literal

from pydantic import EmailStr, Field, field_validator

from petadopt.schemas.base import CamelModel, PatchModel

Role = Literal["user", "admin"]

EMAIL_MAX_LENGTH = 50


def _check_email_length(value: str | None) -> str | None:
    if value is not None and len(value) > EMAIL_MAX_LENGTH:
        raise ValueError(f"Email must be at most {EMAIL_MAX_LENGTH} characters long")
    return value


class UserCreate(CamelModel):
    first_name: str = Field(min_length=2, max_length=50)
    last_name: str = Field(min_length=2, max_length=50)
    email: EmailStr
    password: str = Field(min_length=6, max_length=100)
    role: Role = "user"

    @field_validator("email")
    @classmethod
    def check_email_length(cls, value: str | None) -> str | None:
        return _check_email_length(value)


class UserUpdate(PatchModel):
    """Body of PUT /users/{id}. The pets list belongs to the adoption workflow."""

    first_name: str | None = Field(default=None, min_length=2, max_length=50)
    last_name: str | None = Field(default=None, min_length=2, max_length=50)
    email: EmailStr | None = None
    password: str | None = Field(default=None, min_length=6, max_length=100)
    role: Role | None = None

    @field_validator("email")
    @classmethod
    def check_email_length(cls, value: str | None) -> str | None:
        return _check_email_length(value)


class UserResponse(CamelModel):
    id: uuid.UUID
    first_name: str
    last_name: str
    email: str
    role: str
    pets: list[uuid.UUID]
    created_at: datetime
    updated_at: datetime
