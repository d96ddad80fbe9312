"""User business rules.

Email is the natural key. Passwords are hashed here, before anything
reaches the store, on both create and update.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from petadopt.errors import invalid_request, resource_exists
from petadopt.logging import get_logger
from petadopt.models import User
from petadopt.repositories.base import MAX_PAGE_SIZE
from petadopt.schemas.user import UserCreate, UserUpdate
from petadopt.security import hash_password

logger = get_logger(__name__)


class UserStore(Protocol):
    async def create(self, data: Mapping[str, Any]) -> User: ...
    async def find_all(self, skip: int = 0, limit: int = MAX_PAGE_SIZE) -> list[User]: ...
    async def find_by_id(self, id: str, *, for_update: bool = False) -> User | None: ...
    async def find_by_email(self, email: str) -> User | None: ...
    async def update(self, id: str, changes: Mapping[str, Any]) -> User | None: ...
    async def delete(self, id: str) -> User | None: ...


class UserService:
    def __init__(self, store: UserStore) -> None:
        self.store = store

    async def create(self, data: UserCreate) -> User:
        if await self.store.find_by_email(data.email) is not None:
            raise resource_exists("User", {"email": data.email})
        values = data.model_dump()
        values["password"] = hash_password(data.password)
        values["pets"] = []
        user = await self.store.create(values)
        logger.info("user_created", user_id=str(user.id))
        return user

    async def list_all(self, skip: int = 0, limit: int = MAX_PAGE_SIZE) -> list[User]:
        return await self.store.find_all(skip, limit)

    async def get_by_id(self, id: str) -> User | None:
        if not id:
            raise invalid_request("User ID is required")
        return await self.store.find_by_id(id)

    async def get_by_email(self, email: str) -> User | None:
        if not email:
            raise invalid_request("User email is required")
        return await self.store.find_by_email(email)

    async def update(self, id: str, patch: UserUpdate) -> User | None:
        if not id:
            raise invalid_request("User ID is required")
        changes = patch.changes()
        if not changes:
            raise invalid_request("No update data provided")

        existing = await self.store.find_by_id(id)
        if existing is None:
            return None

        new_email = changes.get("email")
        if new_email is not None and new_email != existing.email:
            holder = await self.store.find_by_email(new_email)
            if holder is not None and holder.id != existing.id:
                raise resource_exists("User", {"email": new_email})

        if "password" in changes:
            changes["password"] = hash_password(changes["password"])

        return await self.store.update(id, changes)

    async def delete(self, id: str) -> User | None:
        if not id:
            raise invalid_request("User ID is required")
        user = await self.store.delete(id)
        if user is not None:
            logger.info("user_deleted", user_id=id)
        return user

    # The two methods below are reserved for the adoption workflow.

    async def add_pet(self, user_id: str, pet_id: str) -> User | None:
        user = await self.store.find_by_id(user_id)
        if user is None:
            return None
        if pet_id in user.pets:
            return user
        return await self.store.update(user_id, {"pets": [*user.pets, pet_id]})

    async def remove_pet(self, user_id: str, pet_id: str) -> User | None:
        user = await self.store.find_by_id(user_id)
        if user is None:
            return None
        remaining = [ref for ref in user.pets if ref != pet_id]
        return await self.store.update(user_id, {"pets": remaining})
