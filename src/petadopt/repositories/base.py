"""Shared data-access plumbing.

Repositories wrap one AsyncSession and translate storage conditions into
the application's vocabulary:

- an id that is absent *or malformed* comes back as ``None``
- a unique-constraint violation becomes RESOURCE_EXISTS; any other
  constraint violation on insert or update becomes INVALID_REQUEST
- a delete blocked by a foreign key becomes INVALID_REQUEST

They never commit; the request-scoped ``get_db`` dependency owns the
transaction.
"""

import uuid
from collections.abc import Mapping
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from petadopt.db.session import Base
from petadopt.errors import AppError, invalid_request, resource_exists

MAX_PAGE_SIZE = 100


def parse_id(raw: object) -> uuid.UUID | None:
    """Return the UUID for ``raw``, or None when it isn't a well-formed id."""
    if isinstance(raw, uuid.UUID):
        return raw
    try:
        return uuid.UUID(str(raw))
    except ValueError:
        return None


ModelT = TypeVar("ModelT", bound=Base)


class SQLAlchemyRepository(Generic[ModelT]):
    """CRUD over a single model class."""

    model: ClassVar[type[Any]]
    resource: ClassVar[str]
    order_by: ClassVar[str] = "created_at"

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def create(self, data: Mapping[str, Any]) -> ModelT:
        instance = self.model(**data)
        try:
            async with self.db.begin_nested():
                self.db.add(instance)
        except IntegrityError as exc:
            raise self._translate(exc, data) from exc
        return instance

    async def find_all(self, skip: int = 0, limit: int = MAX_PAGE_SIZE) -> list[ModelT]:
        stmt = (
            select(self.model)
            .order_by(getattr(self.model, self.order_by))
            .offset(skip)
            .limit(min(limit, MAX_PAGE_SIZE))
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def find_by_id(self, id: str, *, for_update: bool = False) -> ModelT | None:
        key = parse_id(id)
        if key is None:
            return None
        if not for_update:
            return await self.db.get(self.model, key)
        stmt = select(self.model).where(self.model.id == key).with_for_update()
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def update(self, id: str, changes: Mapping[str, Any]) -> ModelT | None:
        instance = await self.find_by_id(id)
        if instance is None:
            return None
        try:
            async with self.db.begin_nested():
                for field, value in changes.items():
                    setattr(instance, field, value)
        except IntegrityError as exc:
            raise self._translate(exc, changes) from exc
        return instance

    async def delete(self, id: str) -> ModelT | None:
        instance = await self.find_by_id(id)
        if instance is None:
            return None
        try:
            async with self.db.begin_nested():
                await self.db.delete(instance)
        except IntegrityError as exc:
            raise invalid_request(
                f"{self.resource} is still referenced by other records",
                {"id": str(id)},
            ) from exc
        return instance

    async def _find_one_by(self, column: str, value: object) -> ModelT | None:
        stmt = select(self.model).where(getattr(self.model, column) == value)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    def _translate(self, exc: IntegrityError, data: Mapping[str, Any]) -> AppError:
        # Unique constraints are named uq_<table>_<column> by the naming convention
        if f"uq_{self.model.__tablename__}_" in str(exc.orig):
            return resource_exists(self.resource, self._conflict_details(data))
        return invalid_request(f"Invalid {self.resource.lower()} data", {"fields": sorted(data)})

    def _conflict_details(self, data: Mapping[str, Any]) -> dict[str, Any] | None:
        return None
