"""User data-access layer."""

from collections.abc import Mapping
from typing import Any

from petadopt.models import User
from petadopt.repositories.base import SQLAlchemyRepository


class UserRepository(SQLAlchemyRepository[User]):
    model = User
    resource = "User"

    async def find_by_email(self, email: str) -> User | None:
        return await self._find_one_by("email", email)

    def _conflict_details(self, data: Mapping[str, Any]) -> dict[str, Any] | None:
        return {"email": data["email"]} if "email" in data else None
