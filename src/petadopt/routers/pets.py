"""Pet endpoints."""

from fastapi import APIRouter, Query

from petadopt.dependencies import Pets
from petadopt.errors import resource_not_found
from petadopt.repositories.base import MAX_PAGE_SIZE
from petadopt.schemas.base import SuccessResponse
from petadopt.schemas.pet import PetCreate, PetResponse, PetUpdate

router = APIRouter(prefix="/pets", tags=["pets"])


@router.post("", response_model=SuccessResponse[PetResponse], status_code=201)
async def create_pet(body: PetCreate, pets: Pets) -> SuccessResponse[PetResponse]:
    pet = await pets.create(body)
    return SuccessResponse(
        message=f"Pet {pet.name} created successfully",
        payload=PetResponse.model_validate(pet),
    )


@router.get("", response_model=SuccessResponse[list[PetResponse]], status_code=200)
async def list_pets(
    pets: Pets,
    skip: int = Query(0, ge=0),
    limit: int = Query(MAX_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
) -> SuccessResponse[list[PetResponse]]:
    items = await pets.list_all(skip, limit)
    return SuccessResponse(
        message="Pets fetched successfully",
        payload=[PetResponse.model_validate(pet) for pet in items],
    )


@router.get("/{pet_id}", response_model=SuccessResponse[PetResponse], status_code=200)
async def get_pet(pet_id: str, pets: Pets) -> SuccessResponse[PetResponse]:
    pet = await pets.get_by_id(pet_id)
    if pet is None:
        raise resource_not_found("Pet", pet_id, {"id": pet_id})
    return SuccessResponse(
        message=f"Pet {pet.name} fetched successfully",
        payload=PetResponse.model_validate(pet),
    )


@router.put("/{pet_id}", response_model=SuccessResponse[PetResponse], status_code=200)
async def update_pet(pet_id: str, body: PetUpdate, pets: Pets) -> SuccessResponse[PetResponse]:
    pet = await pets.update(pet_id, body)
    if pet is None:
        raise resource_not_found("Pet", pet_id, {"id": pet_id})
    return SuccessResponse(
        message=f"Pet {pet.name} updated successfully",
        payload=PetResponse.model_validate(pet),
    )


@router.delete("/{pet_id}", response_model=SuccessResponse[PetResponse], status_code=200)
async def delete_pet(pet_id: str, pets: Pets) -> SuccessResponse[PetResponse]:
    pet = await pets.delete(pet_id)
    if pet is None:
        raise resource_not_found("Pet", pet_id, {"id": pet_id})
    return SuccessResponse(
        message=f"Pet {pet.name} deleted successfully",
        payload=PetResponse.model_validate(pet),
    )
