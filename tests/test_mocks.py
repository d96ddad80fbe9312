"""Mock-data endpoints."""

from datetime import UTC, date, datetime, timedelta

import pytest
from httpx import AsyncClient

from petadopt.services.mocks import DOG_NAMES, generate_pet, generate_user, mock_pet_record
from tests.fakes import InMemoryPetStore, InMemoryUserStore


@pytest.mark.asyncio
async def test_mocking_pets_are_not_persisted(
    client: AsyncClient, pet_store: InMemoryPetStore
) -> None:
    resp = await client.get("/api/mocks/mockingpets", params={"count": 3})

    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Generated 3 mock pets"
    assert len(body["payload"]) == 3
    assert {"id", "name", "breed", "isAdopted"} <= set(body["payload"][0])
    assert pet_store.rows == {}


@pytest.mark.asyncio
async def test_mocking_users_hide_passwords(client: AsyncClient) -> None:
    resp = await client.get("/api/mocks/mockingusers", params={"count": 2})

    assert resp.status_code == 200
    users = resp.json()["payload"]
    assert len(users) == 2
    assert all("password" not in user for user in users)


@pytest.mark.asyncio
async def test_generate_data_inserts_records(
    client: AsyncClient, pet_store: InMemoryPetStore, user_store: InMemoryUserStore
) -> None:
    resp = await client.post("/api/mocks/generateData", json={"users": 2, "pets": 3})

    assert resp.status_code == 200
    payload = resp.json()["payload"]
    assert len(payload["users"]) == 2
    assert len(payload["pets"]) == 3
    assert len(user_store.rows) == 2
    assert len(pet_store.rows) == 3


def test_generated_users_have_distinct_emails() -> None:
    users = [generate_user() for _ in range(50)]

    assert len({user.email for user in users}) == 50
    assert len({(user.first_name, user.last_name) for user in users}) > 10


def test_generated_pets_respect_field_bounds() -> None:
    today = date.today()
    for _ in range(50):
        pet = generate_pet()
        base, _, suffix = pet.name.partition("-")
        assert base in DOG_NAMES
        assert len(suffix) == 4 and suffix.isalnum()
        assert 10 <= len(pet.description) <= 500
        assert pet.birth_date is not None
        assert today - timedelta(days=5 * 366) <= pet.birth_date <= today


def test_mock_records_are_dated_in_the_past() -> None:
    now = datetime.now(UTC)
    record = mock_pet_record()

    assert record["created_at"] <= now
    assert record["updated_at"] <= now
