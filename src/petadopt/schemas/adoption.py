"""Adoption request/response schemas."""

import uuid
from datetime import datetime
from typing import Literal

from petadopt.schemas.base import CamelModel, PatchModel

Status = Literal["pending", "approved", "rejected"]


class AdoptionCreate(CamelModel):
    """Body of POST /adoptions.

    petId/userId are plain strings: a missing or empty value is an
    INVALID_REQUEST raised by the workflow, and an id that doesn't parse is
    simply "not found".
    """

    pet_id: str = ""
    user_id: str = ""
    status: Status | None = None
    adoption_date: datetime | None = None


class AdoptionUpdate(PatchModel):
    """Body of PUT /adoptions/{id}. The pet and user of an adoption are fixed."""

    status: Status | None = None
    adoption_date: datetime | None = None


class AdoptionResponse(CamelModel):
    id: uuid.UUID
    pet_id: uuid.UUID
    user_id: uuid.UUID
    adoption_date: datetime
    status: str


class DeletedAdoption(CamelModel):
    """Snapshot returned by DELETE /adoptions/{id}."""

    id: uuid.UUID
    pet_id: uuid.UUID
    user_id: uuid.UUID
    status: str
    adoption_date: datetime
