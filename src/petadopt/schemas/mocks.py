"""Mock-data endpoint schemas."""

from pydantic import Field

from petadopt.schemas.base import CamelModel
from petadopt.schemas.pet import PetResponse
from petadopt.schemas.user import UserResponse


class GenerateDataRequest(CamelModel):
    """Body of POST /mocks/generateData: how many of each to insert."""

    users: int = Field(default=0, ge=0, le=100)
    pets: int = Field(default=0, ge=0, le=100)


class GeneratedData(CamelModel):
    users: list[UserResponse] = []
    pets: list[PetResponse] = []
