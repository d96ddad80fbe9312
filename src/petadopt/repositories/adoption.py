"""Adoption data-access layer."""

from sqlalchemy import select

from petadopt.models import Adoption
from petadopt.repositories.base import SQLAlchemyRepository, parse_id


class AdoptionRepository(SQLAlchemyRepository[Adoption]):
    model = Adoption
    resource = "Adoption"
    order_by = "adoption_date"

    async def find_by_user(self, user_id: str) -> list[Adoption]:
        """Return the user's adoptions, oldest first. A malformed id matches nothing."""
        key = parse_id(user_id)
        if key is None:
            return []
        stmt = select(Adoption).where(Adoption.user_id == key).order_by(Adoption.adoption_date)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
