"""Adoption endpoints."""

from fastapi import APIRouter, Query

from petadopt.dependencies import Adoptions
from petadopt.errors import resource_not_found
from petadopt.repositories.base import MAX_PAGE_SIZE
from petadopt.schemas.adoption import (
    AdoptionCreate,
    AdoptionResponse,
    AdoptionUpdate,
    DeletedAdoption,
)
from petadopt.schemas.base import SuccessResponse

router = APIRouter(prefix="/adoptions", tags=["adoptions"])


@router.post("", response_model=SuccessResponse[AdoptionResponse], status_code=201)
async def create_adoption(
    body: AdoptionCreate, adoptions: Adoptions
) -> SuccessResponse[AdoptionResponse]:
    adoption = await adoptions.create(body)
    return SuccessResponse(
        message=f"Adoption {adoption.id} created successfully",
        payload=AdoptionResponse.model_validate(adoption),
    )


@router.get("", response_model=SuccessResponse[list[AdoptionResponse]], status_code=200)
async def list_adoptions(
    adoptions: Adoptions,
    skip: int = Query(0, ge=0),
    limit: int = Query(MAX_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
) -> SuccessResponse[list[AdoptionResponse]]:
    items = await adoptions.list_all(skip, limit)
    return SuccessResponse(
        message="Adoptions fetched successfully",
        payload=[AdoptionResponse.model_validate(adoption) for adoption in items],
    )


@router.get(
    "/user/{user_id}",
    response_model=SuccessResponse[list[AdoptionResponse]],
    status_code=200,
)
async def list_user_adoptions(
    user_id: str, adoptions: Adoptions
) -> SuccessResponse[list[AdoptionResponse]]:
    items = await adoptions.list_by_user(user_id)
    return SuccessResponse(
        message=f"Adoptions for user {user_id} fetched successfully",
        payload=[AdoptionResponse.model_validate(adoption) for adoption in items],
    )


@router.get("/{adoption_id}", response_model=SuccessResponse[AdoptionResponse], status_code=200)
async def get_adoption(adoption_id: str, adoptions: Adoptions) -> SuccessResponse[AdoptionResponse]:
    adoption = await adoptions.get_by_id(adoption_id)
    if adoption is None:
        raise resource_not_found("Adoption", adoption_id, {"id": adoption_id})
    return SuccessResponse(
        message=f"Adoption {adoption_id} fetched successfully",
        payload=AdoptionResponse.model_validate(adoption),
    )


@router.put("/{adoption_id}", response_model=SuccessResponse[AdoptionResponse], status_code=200)
async def update_adoption(
    adoption_id: str, body: AdoptionUpdate, adoptions: Adoptions
) -> SuccessResponse[AdoptionResponse]:
    adoption = await adoptions.update(adoption_id, body)
    if adoption is None:
        raise resource_not_found("Adoption", adoption_id, {"id": adoption_id})
    return SuccessResponse(
        message=f"Adoption {adoption_id} updated successfully",
        payload=AdoptionResponse.model_validate(adoption),
    )


@router.delete("/{adoption_id}", response_model=SuccessResponse[DeletedAdoption], status_code=200)
async def delete_adoption(
    adoption_id: str, adoptions: Adoptions
) -> SuccessResponse[DeletedAdoption]:
    deleted = await adoptions.delete(adoption_id)
    if deleted is None:
        raise resource_not_found("Adoption", adoption_id, {"id": adoption_id})
    return SuccessResponse(
        message=f"Adoption {adoption_id} deleted successfully",
        payload=deleted,
    )
