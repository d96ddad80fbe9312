"""Pet data-access layer."""

from collections.abc import Mapping
from typing import Any

from petadopt.models import Pet
from petadopt.repositories.base import SQLAlchemyRepository


class PetRepository(SQLAlchemyRepository[Pet]):
    model = Pet
    resource = "Pet"

    async def find_by_name(self, name: str) -> Pet | None:
        return await self._find_one_by("name", name)

    def _conflict_details(self, data: Mapping[str, Any]) -> dict[str, Any] | None:
        return {"name": data["name"]} if "name" in data else None
