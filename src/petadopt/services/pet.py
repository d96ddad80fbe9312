"""Pet business rules.

Sits between the pets router and a PetStore. Empty keys are rejected before
the store is touched; a well-formed key that matches nothing yields None and
the router decides how to report it.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from petadopt.errors import invalid_request, resource_exists
from petadopt.logging import get_logger
from petadopt.models import Pet
from petadopt.repositories.base import MAX_PAGE_SIZE
from petadopt.schemas.pet import PetCreate, PetUpdate

logger = get_logger(__name__)


class PetStore(Protocol):
    async def create(self, data: Mapping[str, Any]) -> Pet: ...
    async def find_all(self, skip: int = 0, limit: int = MAX_PAGE_SIZE) -> list[Pet]: ...
    async def find_by_id(self, id: str, *, for_update: bool = False) -> Pet | None: ...
    async def find_by_name(self, name: str) -> Pet | None: ...
    async def update(self, id: str, changes: Mapping[str, Any]) -> Pet | None: ...
    async def delete(self, id: str) -> Pet | None: ...


class PetService:
    def __init__(self, store: PetStore) -> None:
        self.store = store

    async def create(self, data: PetCreate) -> Pet:
        if await self.store.find_by_name(data.name) is not None:
            raise resource_exists("Pet", {"name": data.name})
        # Omitted birthDate falls back to the column default (today)
        pet = await self.store.create(data.model_dump(exclude_none=True))
        logger.info("pet_created", pet_id=str(pet.id), name=pet.name)
        return pet

    async def list_all(self, skip: int = 0, limit: int = MAX_PAGE_SIZE) -> list[Pet]:
        return await self.store.find_all(skip, limit)

    async def get_by_id(self, id: str, *, lock: bool = False) -> Pet | None:
        """Fetch a pet; ``lock`` takes a row lock for the rest of the transaction."""
        if not id:
            raise invalid_request("Pet ID is required")
        return await self.store.find_by_id(id, for_update=lock)

    async def get_by_name(self, name: str) -> Pet | None:
        if not name:
            raise invalid_request("Pet name is required")
        return await self.store.find_by_name(name)

    async def update(self, id: str, patch: PetUpdate) -> Pet | None:
        if not id:
            raise invalid_request("Pet ID is required")
        changes = patch.changes()
        if not changes:
            raise invalid_request("No update data provided")

        existing = await self.store.find_by_id(id)
        if existing is None:
            return None

        new_name = changes.get("name")
        if new_name is not None and new_name != existing.name:
            holder = await self.store.find_by_name(new_name)
            if holder is not None and holder.id != existing.id:
                raise resource_exists("Pet", {"name": new_name})

        return await self.store.update(id, changes)

    async def delete(self, id: str) -> Pet | None:
        if not id:
            raise invalid_request("Pet ID is required")
        existing = await self.store.find_by_id(id)
        if existing is None:
            return None
        if existing.is_adopted:
            raise invalid_request("Cannot delete adopted pet", {"id": id})
        pet = await self.store.delete(id)
        logger.info("pet_deleted", pet_id=id)
        return pet

    async def set_adopted(self, id: str, adopted: bool) -> Pet | None:
        """Flip the adoption flag. Reserved for the adoption workflow."""
        return await self.store.update(id, {"is_adopted": adopted})
