import logging

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

ADDRESS = {"street": "Street 1", "number": 1, "zipcode": "Zipcode 1", "city": "City 1"}


async def test_create_customer(client: AsyncClient):
    response = await client.post(
        "/api/v1/customers/", json={"name": "Customer 1", "address": ADDRESS}
    )
    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Customer 1"
    assert data["address"] == ADDRESS
    assert data["active"] is False
    assert data["reward_points"] == 0


async def test_create_customer_logs_both_creation_handlers(client: AsyncClient, caplog):
    with caplog.at_level(logging.INFO, logger="StoreAPI"):
        response = await client.post("/api/v1/customers/", json={"name": "Customer 1"})

    assert response.status_code == 201
    messages = [record.getMessage() for record in caplog.records]
    first = messages.index("This is the first log of the event: CustomerCreated")
    second = messages.index("This is the second log of the event: CustomerCreated")
    assert first < second


async def test_create_customer_with_empty_name(client: AsyncClient):
    response = await client.post("/api/v1/customers/", json={"name": ""})
    assert response.status_code == 422
    assert response.json()["detail"] == "Name is required"


async def test_get_customer(client: AsyncClient):
    create_response = await client.post("/api/v1/customers/", json={"name": "Customer 1"})
    customer_id = create_response.json()["id"]

    response = await client.get(f"/api/v1/customers/{customer_id}")
    assert response.status_code == 200
    assert response.json()["id"] == customer_id
    assert response.json()["address"] is None


async def test_get_nonexistent_customer(client: AsyncClient):
    response = await client.get("/api/v1/customers/missing")
    assert response.status_code == 404


async def test_get_customers_with_pagination(client: AsyncClient):
    for i in range(5):
        await client.post("/api/v1/customers/", json={"name": f"Customer {i}"})

    response = await client.get("/api/v1/customers/?skip=2&limit=2")
    assert response.status_code == 200
    assert len(response.json()) == 2


async def test_update_customer(client: AsyncClient):
    create_response = await client.post("/api/v1/customers/", json={"name": "Original"})
    customer_id = create_response.json()["id"]

    response = await client.put(f"/api/v1/customers/{customer_id}", json={"name": "Updated"})
    assert response.status_code == 200
    assert response.json()["name"] == "Updated"


async def test_update_nonexistent_customer(client: AsyncClient):
    response = await client.put("/api/v1/customers/missing", json={"name": "Updated"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Customer not found"


async def test_change_address_logs_new_address(client: AsyncClient, caplog):
    create_response = await client.post("/api/v1/customers/", json={"name": "Customer 1"})
    customer_id = create_response.json()["id"]
    new_address = {"street": "Street 2", "number": 22, "zipcode": "Zip 2", "city": "City 2"}

    with caplog.at_level(logging.INFO, logger="StoreAPI"):
        response = await client.put(
            f"/api/v1/customers/{customer_id}/address", json=new_address
        )

    assert response.status_code == 200
    assert response.json()["address"] == new_address
    assert (
        f"Customer address: {customer_id}, Customer 1 changed to: Street 2, 22, Zip 2 City 2"
        in caplog.messages
    )


async def test_activate_customer_requires_address(client: AsyncClient):
    create_response = await client.post("/api/v1/customers/", json={"name": "Customer 1"})
    customer_id = create_response.json()["id"]

    response = await client.post(f"/api/v1/customers/{customer_id}/activate")
    assert response.status_code == 422
    assert response.json()["detail"] == "Address is mandatory to activate a customer"


async def test_activate_and_deactivate_customer(client: AsyncClient):
    create_response = await client.post(
        "/api/v1/customers/", json={"name": "Customer 1", "address": ADDRESS}
    )
    customer_id = create_response.json()["id"]

    response = await client.post(f"/api/v1/customers/{customer_id}/activate")
    assert response.status_code == 200
    assert response.json()["active"] is True

    response = await client.post(f"/api/v1/customers/{customer_id}/deactivate")
    assert response.status_code == 200
    assert response.json()["active"] is False
