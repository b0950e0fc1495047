"""
Some tests for the expects and returns decorators.
"""

from aiohttp.test_utils import TestClient

from carhire.serializer import JSendSchema, JSendStatus


class TestExpectDecorator:

    async def test_expects_no_data(self, client: TestClient):
        """Assert that trying to make a reservation with no data fails."""
        resp = await client.post('/api/v1/reservations')
        data = JSendSchema().load(await resp.json())
        assert resp.status == 400
        assert "only accepts JSON" in data["data"]["message"]
        assert data["status"] == JSendStatus.FAIL

    async def test_expects_malformed_json(self, client: TestClient):
        resp = await client.post('/api/v1/reservations', data="[", headers={"Content-Type": "application/json"})
        data = JSendSchema().load(await resp.json())
        assert data["status"] == JSendStatus.FAIL
        assert "Could not parse" in data["data"]["message"]

    async def test_expects_invalid_data(self, client: TestClient):
        """Assert that trying to make a reservation with invalid data fails."""
        resp = await client.post('/api/v1/reservations', json={"wrong": "data"})
        data = JSendSchema().load(await resp.json())
        assert data["status"] == JSendStatus.FAIL
        assert "did not validate" in data["data"]["message"]
        assert "car_id" in data["data"]["errors"]

    async def test_expects_object(self, client: TestClient):
        """Assert that routes validated by the services still need a JSON object."""
        resp = await client.post('/api/v1/vehicles', json=["Toyota"])
        data = JSendSchema().load(await resp.json())
        assert resp.status == 400
        assert "JSON object" in data["data"]["message"]


class TestReturnsDecorator:

    async def test_returns_created(self, client: TestClient, vehicle_payload_factory):
        resp = await client.post('/api/v1/vehicles', json=vehicle_payload_factory())
        data = JSendSchema().load(await resp.json())
        assert resp.status == 201
        assert data["status"] == JSendStatus.SUCCESS

    async def test_returns_no_content(self, client: TestClient, reservation_manager, random_vehicle, random_customer):
        reservation_manager.reserve(random_vehicle.id, random_customer.id)
        resp = await client.delete(f'/api/v1/reservations/{random_vehicle.id}')
        assert resp.status == 204
        assert await resp.read() == b""
