import os
from collections.abc import AsyncIterator
from typing import Any

# Settings are read at import time and PORT / DATABASE_URL are required.
os.environ.setdefault("PORT", "8080")
os.environ.setdefault("DATABASE_URL", "postgresql+asyncpg://petadopt@localhost:5432/petadopt")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from petadopt.db.session import get_db  # noqa: E402
from petadopt.dependencies import get_adoption_store, get_pet_store, get_user_store  # noqa: E402
from petadopt.main import app  # noqa: E402
from petadopt.services.adoption import AdoptionService  # noqa: E402
from petadopt.services.pet import PetService  # noqa: E402
from petadopt.services.user import UserService  # noqa: E402
from tests.fakes import InMemoryAdoptionStore, InMemoryPetStore, InMemoryUserStore  # noqa: E402

# Fixtures defined outside conftest.py must be registered as plugins.
pytest_plugins = ["tests.seeds"]


class FakeSession:
    """Stands in for AsyncSession where only connectivity is checked (/health)."""

    def __init__(self) -> None:
        self.statements: list[Any] = []

    async def execute(self, statement: Any) -> None:
        self.statements.append(statement)


@pytest.fixture
def pet_store() -> InMemoryPetStore:
    return InMemoryPetStore()


@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def adoption_store() -> InMemoryAdoptionStore:
    return InMemoryAdoptionStore()


@pytest.fixture
def pet_service(pet_store: InMemoryPetStore) -> PetService:
    return PetService(pet_store)


@pytest.fixture
def user_service(user_store: InMemoryUserStore) -> UserService:
    return UserService(user_store)


@pytest.fixture
def adoption_service(
    adoption_store: InMemoryAdoptionStore,
    pet_service: PetService,
    user_service: UserService,
) -> AdoptionService:
    return AdoptionService(adoption_store, pet_service, user_service)


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest_asyncio.fixture
async def client(
    session: FakeSession,
    pet_store: InMemoryPetStore,
    user_store: InMemoryUserStore,
    adoption_store: InMemoryAdoptionStore,
) -> AsyncIterator[AsyncClient]:
    """HTTP client wired to the in-memory stores of this test."""

    async def override_get_db() -> AsyncIterator[FakeSession]:
        yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_pet_store] = lambda: pet_store
    app.dependency_overrides[get_user_store] = lambda: user_store
    app.dependency_overrides[get_adoption_store] = lambda: adoption_store

    # Unhandled exceptions are still re-raised by Starlette after the 500
    # response is sent; keep them out of the test so the response can be checked.
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()
