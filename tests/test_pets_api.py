"""Integration tests for the /api/pets endpoints."""

import pytest
from httpx import AsyncClient

from petadopt.errors import STATUS_BY_CODE, ErrorCode
from petadopt.models import Pet
from tests.factories import pet_payload
from tests.fakes import InMemoryPetStore


@pytest.mark.asyncio
async def test_create_pet_returns_201_envelope(client: AsyncClient) -> None:
    resp = await client.post("/api/pets", json=pet_payload(name="Rex"))

    assert resp.status_code == 201
    body = resp.json()
    assert body["success"] is True
    assert body["message"] == "Pet Rex created successfully"
    payload = body["payload"]
    assert payload["name"] == "Rex"
    assert payload["isAdopted"] is False
    assert payload["birthDate"] == "2021-04-12"
    assert "id" in payload


@pytest.mark.asyncio
async def test_create_duplicate_pet_returns_resource_exists(
    client: AsyncClient, pet_store: InMemoryPetStore
) -> None:
    first = await client.post("/api/pets", json=pet_payload(name="Milo"))
    second = await client.post("/api/pets", json=pet_payload(name="Milo"))

    assert first.status_code == 201
    assert second.status_code == 400
    body = second.json()
    assert body["status"] == 400
    assert body["message"] == "Pet already exists"
    assert body["error"]["code"] == "RESOURCE_EXISTS"
    assert body["error"]["details"] == {"name": "Milo"}
    assert len(pet_store.rows) == 1


@pytest.mark.asyncio
async def test_get_unknown_pet_returns_404_with_id(client: AsyncClient) -> None:
    resp = await client.get("/api/pets/nonexistent-id")

    assert resp.status_code == 404
    body = resp.json()
    assert body["error"]["code"] == "RESOURCE_NOT_FOUND"
    assert "nonexistent-id" in body["message"]
    assert body["error"]["details"] == {"id": "nonexistent-id"}


@pytest.mark.asyncio
async def test_get_pet(client: AsyncClient, rex: Pet) -> None:
    resp = await client.get(f"/api/pets/{rex.id}")

    assert resp.status_code == 200
    assert resp.json()["payload"]["id"] == str(rex.id)


@pytest.mark.asyncio
async def test_list_pets(client: AsyncClient, rex: Pet) -> None:
    resp = await client.get("/api/pets")

    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Pets fetched successfully"
    assert [pet["name"] for pet in body["payload"]] == ["Rex"]


@pytest.mark.asyncio
async def test_list_pets_limit_over_max_is_rejected(client: AsyncClient) -> None:
    resp = await client.get("/api/pets", params={"limit": 101})
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_create_invalid_pet_returns_validation_error(client: AsyncClient) -> None:
    resp = await client.post("/api/pets", json=pet_payload() | {"name": "Al", "gender": "other"})

    assert resp.status_code == 400
    body = resp.json()
    assert body["error"]["code"] == "VALIDATION_ERROR"
    fields = {tuple(err["loc"])[-1] for err in body["error"]["details"]}
    assert {"name", "gender"} <= fields


@pytest.mark.asyncio
async def test_update_pet(client: AsyncClient, rex: Pet) -> None:
    resp = await client.put(f"/api/pets/{rex.id}", json={"breed": "Boxer"})

    assert resp.status_code == 200
    assert resp.json()["payload"]["breed"] == "Boxer"
    assert resp.json()["message"] == "Pet Rex updated successfully"


@pytest.mark.asyncio
async def test_update_cannot_set_adoption_flag(client: AsyncClient, rex: Pet) -> None:
    resp = await client.put(f"/api/pets/{rex.id}", json={"isAdopted": True})

    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"
    assert rex.is_adopted is False


@pytest.mark.asyncio
async def test_update_with_empty_body_is_invalid(client: AsyncClient, rex: Pet) -> None:
    resp = await client.put(f"/api/pets/{rex.id}", json={})

    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "INVALID_REQUEST"


@pytest.mark.asyncio
async def test_update_unknown_pet_returns_404(client: AsyncClient) -> None:
    resp = await client.put("/api/pets/nonexistent-id", json={"breed": "Boxer"})
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_delete_pet(client: AsyncClient, rex: Pet, pet_store: InMemoryPetStore) -> None:
    resp = await client.delete(f"/api/pets/{rex.id}")

    assert resp.status_code == 200
    assert resp.json()["message"] == "Pet Rex deleted successfully"
    assert pet_store.rows == {}

    again = await client.delete(f"/api/pets/{rex.id}")
    assert again.status_code == 404


@pytest.mark.asyncio
async def test_error_envelope_includes_stack_outside_production(client: AsyncClient) -> None:
    resp = await client.get("/api/pets/nonexistent-id")
    error = resp.json()["error"]

    assert error["name"] == "AppError"
    assert "stack" in error


@pytest.mark.asyncio
async def test_unknown_route_uses_error_envelope(client: AsyncClient) -> None:
    resp = await client.get("/api/kittens")

    assert resp.status_code == 404
    body = resp.json()
    assert body["message"] == "Resource not found"
    assert body["error"]["details"] == {"path": "/api/kittens", "method": "GET"}


@pytest.mark.asyncio
async def test_wrong_method_status_matches_error_code(client: AsyncClient) -> None:
    resp = await client.patch("/api/pets", json={})

    body = resp.json()
    assert body["error"]["code"] == "INVALID_REQUEST"
    assert resp.status_code == body["status"] == STATUS_BY_CODE[ErrorCode.INVALID_REQUEST]
    assert body["error"]["details"] == {"path": "/api/pets", "method": "PATCH"}


@pytest.mark.asyncio
async def test_storage_fault_returns_500_envelope(
    client: AsyncClient, pet_store: InMemoryPetStore
) -> None:
    pet_store.fail_on.add("find_all")

    resp = await client.get("/api/pets")

    assert resp.status_code == 500
    body = resp.json()
    assert body["status"] == 500
    assert body["error"]["code"] == "INTERNAL_SERVER_ERROR"
    assert body["error"]["name"] == "StorageFault"
