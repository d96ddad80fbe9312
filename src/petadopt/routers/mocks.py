"""Mock-data endpoints.

GET  /mocks/mockingpets  : generate pets without saving them
GET  /mocks/mockingusers : generate users (hashed passwords) without saving them
POST /mocks/generateData : generate and insert users and pets
"""

from typing import Any

from fastapi import APIRouter, Query

from petadopt.dependencies import Pets, Users
from petadopt.schemas.base import SuccessResponse
from petadopt.schemas.mocks import GeneratedData, GenerateDataRequest
from petadopt.schemas.pet import PetResponse
from petadopt.schemas.user import UserResponse
from petadopt.services.mocks import generate_pet, generate_user, mock_pets, mock_users

router = APIRouter(prefix="/mocks", tags=["mocks"])


@router.get("/mockingpets", response_model=SuccessResponse[list[PetResponse]], status_code=200)
async def mocking_pets(count: int = Query(10, ge=1, le=100)) -> SuccessResponse[Any]:
    return SuccessResponse(message=f"Generated {count} mock pets", payload=mock_pets(count))


@router.get("/mockingusers", response_model=SuccessResponse[list[UserResponse]], status_code=200)
async def mocking_users(count: int = Query(50, ge=1, le=100)) -> SuccessResponse[Any]:
    return SuccessResponse(message=f"Generated {count} mock users", payload=mock_users(count))


@router.post("/generateData", response_model=SuccessResponse[GeneratedData], status_code=200)
async def generate_data(
    body: GenerateDataRequest, pets: Pets, users: Users
) -> SuccessResponse[GeneratedData]:
    created_users = [await users.create(generate_user()) for _ in range(body.users)]
    created_pets = [await pets.create(generate_pet()) for _ in range(body.pets)]
    return SuccessResponse(
        message=f"Generated and inserted {body.users} users and {body.pets} pets",
        payload=GeneratedData(
            users=[UserResponse.model_validate(user) for user in created_users],
            pets=[PetResponse.model_validate(pet) for pet in created_pets],
        ),
    )
