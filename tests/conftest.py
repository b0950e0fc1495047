from datetime import datetime, timezone
from random import choice

import pytest
from aiohttp.test_utils import TestClient
from faker import Faker
from faker.providers import color, internet, person

from carhire.app import build_app
from carhire.models import Identity, Vehicle, Customer
from carhire.service import VehicleManager, CustomerManager, ReservationManager
from carhire.store import Storage
from carhire.store.memory import VectorMemory
from tests.util import random_key, FrozenClock

fake = Faker()
fake.add_provider(color)
fake.add_provider(internet)
fake.add_provider(person)

MAKES = {
    "Toyota": ["Corolla", "Yaris", "Prius"],
    "Ford": ["Focus", "Fiesta", "Mustang"],
    "Volkswagen": ["Golf", "Polo", "Passat"],
}


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def memory() -> VectorMemory:
    return VectorMemory()


@pytest.fixture
def storage(memory) -> Storage:
    return Storage(memory, bucket_pages=1)


@pytest.fixture
def vehicle_manager(storage, clock) -> VehicleManager:
    return VehicleManager(storage, clock)


@pytest.fixture
def customer_manager(storage) -> CustomerManager:
    return CustomerManager(storage)


@pytest.fixture
def reservation_manager(storage, vehicle_manager, customer_manager, clock) -> ReservationManager:
    return ReservationManager(storage, vehicle_manager, customer_manager, clock)


@pytest.fixture
def owner() -> Identity:
    return Identity.from_hex(random_key(29))


@pytest.fixture
def stranger() -> Identity:
    return Identity.from_hex(random_key(29))


@pytest.fixture
def vehicle_payload_factory():
    def create_payload(**overrides):
        make = choice(list(MAKES))
        payload = {
            "make": make,
            "model": choice(MAKES[make]),
            "year": fake.random_int(1990, 2024),
            "color": fake.color_name(),
            "is_booked": False,
        }
        payload.update(overrides)
        return payload

    return create_payload


@pytest.fixture
def customer_payload_factory():
    def create_payload(**overrides):
        payload = {"name": fake.name(), "contact": fake.email()}
        payload.update(overrides)
        return payload

    return create_payload


@pytest.fixture
def random_vehicle(vehicle_manager, vehicle_payload_factory, owner) -> Vehicle:
    """Adds a random vehicle owned by the owner."""
    return vehicle_manager.add(vehicle_payload_factory(), caller=owner)


@pytest.fixture
def random_customer(customer_manager, customer_payload_factory) -> Customer:
    return customer_manager.add(customer_payload_factory())


@pytest.fixture
async def client(aiohttp_client, storage, clock) -> TestClient:
    app = build_app(storage=storage, clock=clock)
    return await aiohttp_client(app)


@pytest.fixture
def auth_header():
    def create_header(identity: Identity):
        return {"Authorization": f"Bearer {identity}"}

    return create_header
