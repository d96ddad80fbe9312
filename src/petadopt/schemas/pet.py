"""Pet request/response schemas."""

import uuid
from datetime import date, datetime
from typing import Literal

from pydantic import Field

from petadopt.schemas.base import CamelModel, PatchModel

Gender = Literal["male", "female"]
Size = Literal["small", "medium", "large"]


class PetCreate(CamelModel):
    """Body of POST /pets. birthDate defaults to today when omitted."""

    name: str = Field(min_length=3, max_length=20)
    birth_date: date | None = None
    breed: str = Field(min_length=3, max_length=15)
    gender: Gender
    size: Size
    description: str = Field(min_length=10, max_length=500)


class PetUpdate(PatchModel):
    """Body of PUT /pets/{id}. isAdopted is deliberately absent."""

    name: str | None = Field(default=None, min_length=3, max_length=20)
    birth_date: date | None = None
    breed: str | None = Field(default=None, min_length=3, max_length=15)
    gender: Gender | None = None
    size: Size | None = None
    description: str | None = Field(default=None, min_length=10, max_length=500)


class PetResponse(CamelModel):
    id: uuid.UUID
    name: str
    birth_date: date
    breed: str
    gender: str
    size: str
    description: str
    is_adopted: bool
    created_at: datetime
    updated_at: datetime
