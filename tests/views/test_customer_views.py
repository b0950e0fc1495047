from carhire.serializer import JSendSchema
from carhire.serializer.models import CustomerSchema


class TestCustomersView:

    async def test_add_customer(self, client, customer_payload_factory, customer_manager):
        payload = customer_payload_factory()
        response = await client.post("/api/v1/customers", json=payload)
        response_data = JSendSchema.of(customer=CustomerSchema()).load(await response.json())

        assert response.status == 201
        assert response_data["data"]["customer"]["name"] == payload["name"]
        assert response_data["data"]["customer"]["url"] == "/api/v1/customers/0"
        assert customer_manager.get(0).contact == payload["contact"]

    async def test_add_invalid_customer(self, client):
        response = await client.post("/api/v1/customers", json={"name": ""})
        response_data = JSendSchema().load(await response.json())
        assert response.status == 400
        assert response_data["data"]["reason"] == "ValidationFailed"


class TestCustomerView:

    async def test_get_customer(self, client, random_customer):
        response = await client.get(f"/api/v1/customers/{random_customer.id}")
        response_data = JSendSchema.of(customer=CustomerSchema()).load(await response.json())
        assert response_data["data"]["customer"]["id"] == random_customer.id

    async def test_get_missing_customer(self, client):
        response = await client.get("/api/v1/customers/7")
        assert response.status == 404

    async def test_delete_customer(self, client, random_customer, customer_manager):
        response = await client.delete(f"/api/v1/customers/{random_customer.id}")
        assert response.status == 200
        assert customer_manager.find(random_customer.id) is None

        response = await client.delete(f"/api/v1/customers/{random_customer.id}")
        assert response.status == 404
