"""Shared FastAPI dependencies.

Reusable type aliases and dependency functions that routers import.
Defined here (not in main.py) to avoid circular imports when routers
are registered in main.

Stores are built from the request's session and services from their
stores. Tests swap the ``get_*_store`` providers through
``app.dependency_overrides`` to run against in-memory stores.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from petadopt.db.session import get_db
from petadopt.repositories.adoption import AdoptionRepository
from petadopt.repositories.pet import PetRepository
from petadopt.repositories.user import UserRepository
from petadopt.services.adoption import AdoptionService, AdoptionStore
from petadopt.services.pet import PetService, PetStore
from petadopt.services.user import UserService, UserStore

DB = Annotated[AsyncSession, Depends(get_db)]


def get_pet_store(db: DB) -> PetStore:
    return PetRepository(db)


def get_user_store(db: DB) -> UserStore:
    return UserRepository(db)


def get_adoption_store(db: DB) -> AdoptionStore:
    return AdoptionRepository(db)


def get_pet_service(store: Annotated[PetStore, Depends(get_pet_store)]) -> PetService:
    return PetService(store)


def get_user_service(store: Annotated[UserStore, Depends(get_user_store)]) -> UserService:
    return UserService(store)


Pets = Annotated[PetService, Depends(get_pet_service)]
Users = Annotated[UserService, Depends(get_user_service)]


def get_adoption_service(
    store: Annotated[AdoptionStore, Depends(get_adoption_store)],
    pets: Pets,
    users: Users,
) -> AdoptionService:
    return AdoptionService(store, pets, users)


Adoptions = Annotated[AdoptionService, Depends(get_adoption_service)]
