"""Adoption workflow.

The only operations here that touch more than one entity:

create: validate user and pet, insert the adoption, mark the pet adopted,
        append the pet to the user's list.
delete: un-mark the pet, drop it from the user's list, remove the record.

Both run inside the request transaction opened by ``get_db``, so a failure
part-way through rolls back every write already made. The pet row is locked
while it is checked, which serializes concurrent attempts to adopt the same
pet.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from petadopt.errors import AppError, internal_server_error, invalid_request, resource_not_found
from petadopt.logging import get_logger
from petadopt.models import Adoption
from petadopt.repositories.base import MAX_PAGE_SIZE
from petadopt.schemas.adoption import AdoptionCreate, AdoptionUpdate, DeletedAdoption
from petadopt.services.pet import PetService
from petadopt.services.user import UserService

logger = get_logger(__name__)


class AdoptionStore(Protocol):
    async def create(self, data: Mapping[str, Any]) -> Adoption: ...
    async def find_all(self, skip: int = 0, limit: int = MAX_PAGE_SIZE) -> list[Adoption]: ...
    async def find_by_id(self, id: str, *, for_update: bool = False) -> Adoption | None: ...
    async def find_by_user(self, user_id: str) -> list[Adoption]: ...
    async def update(self, id: str, changes: Mapping[str, Any]) -> Adoption | None: ...
    async def delete(self, id: str) -> Adoption | None: ...


class AdoptionService:
    def __init__(self, store: AdoptionStore, pets: PetService, users: UserService) -> None:
        self.store = store
        self.pets = pets
        self.users = users

    async def create(self, data: AdoptionCreate) -> Adoption:
        if not data.pet_id or not data.user_id:
            raise invalid_request("Pet ID and User ID are required")

        user = await self.users.get_by_id(data.user_id)
        if user is None:
            raise resource_not_found("User", data.user_id, {"id": data.user_id})

        pet = await self.pets.get_by_id(data.pet_id, lock=True)
        if pet is None:
            raise resource_not_found("Pet", data.pet_id, {"id": data.pet_id})

        if pet.is_adopted:
            raise invalid_request("Pet is already adopted", {"petId": data.pet_id})

        values: dict[str, Any] = {"pet_id": pet.id, "user_id": user.id}
        if data.status is not None:
            values["status"] = data.status
        if data.adoption_date is not None:
            values["adoption_date"] = data.adoption_date

        try:
            adoption = await self.store.create(values)
            await self.pets.set_adopted(str(pet.id), True)
            await self.users.add_pet(str(user.id), str(pet.id))
        except Exception as exc:
            logger.exception("adoption_failed", pet_id=str(pet.id), user_id=str(user.id))
            cause = exc.message if isinstance(exc, AppError) else str(exc)
            raise internal_server_error("Failed to complete adoption process", cause) from exc

        logger.info(
            "adoption_created",
            adoption_id=str(adoption.id),
            pet_id=str(pet.id),
            user_id=str(user.id),
        )
        return adoption

    async def list_all(self, skip: int = 0, limit: int = MAX_PAGE_SIZE) -> list[Adoption]:
        return await self.store.find_all(skip, limit)

    async def get_by_id(self, id: str) -> Adoption | None:
        if not id:
            raise invalid_request("Adoption ID is required")
        return await self.store.find_by_id(id)

    async def list_by_user(self, user_id: str) -> list[Adoption]:
        if not user_id:
            raise invalid_request("User ID is required")
        return await self.store.find_by_user(user_id)

    async def update(self, id: str, patch: AdoptionUpdate) -> Adoption | None:
        """Apply a status/date change. Pet and user links are not re-validated."""
        if not id:
            raise invalid_request("Adoption ID is required")
        changes = patch.changes()
        if not changes:
            raise invalid_request("No update data provided")
        if await self.store.find_by_id(id) is None:
            return None
        return await self.store.update(id, changes)

    async def delete(self, id: str) -> DeletedAdoption | None:
        if not id:
            raise invalid_request("Adoption ID is required")
        adoption = await self.store.find_by_id(id)
        if adoption is None:
            return None

        snapshot = DeletedAdoption.model_validate(adoption)
        pet_id, user_id = str(adoption.pet_id), str(adoption.user_id)

        # Reverse the side effects first, then drop the record
        if await self.pets.set_adopted(pet_id, False) is None:
            logger.warning("adoption_pet_missing", adoption_id=id, pet_id=pet_id)
        if await self.users.remove_pet(user_id, pet_id) is None:
            logger.warning("adoption_user_missing", adoption_id=id, user_id=user_id)
        await self.store.delete(id)

        logger.info("adoption_deleted", adoption_id=id, pet_id=pet_id, user_id=user_id)
        return snapshot
