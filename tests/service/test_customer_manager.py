import pytest

from carhire.service import ValidationFailed, NotFound
from carhire.store.exceptions import RecordTooLargeError


class TestCustomerManager:

    def test_add_customer(self, customer_manager, storage):
        customer = customer_manager.add({"name": "Alice", "contact": "alice@example.com"})
        assert customer.id == 0
        assert customer.name == "Alice"
        assert customer_manager.get(0) == customer
        assert storage.customer_ids.current() == 1

    def test_ids_are_separate_from_vehicles(self, customer_manager, customer_payload_factory, random_vehicle):
        """Assert that customers and vehicles count their ids separately."""
        assert customer_manager.add(customer_payload_factory()).id == 0

    @pytest.mark.parametrize("payload", [
        {"name": "", "contact": "alice@example.com"},
        {"name": "Alice"},
        {"contact": "alice@example.com"},
        {"name": 12, "contact": "alice@example.com"},
    ])
    def test_add_invalid_customer(self, customer_manager, storage, payload):
        with pytest.raises(ValidationFailed):
            customer_manager.add(payload)
        assert storage.customer_ids.current() == 0
        assert len(storage.customers) == 0

    def test_add_oversized_customer(self, customer_manager, customer_payload_factory, storage):
        with pytest.raises(RecordTooLargeError):
            customer_manager.add(customer_payload_factory(contact="c" * 2000))

        assert storage.customer_ids.current() == 0
        assert len(storage.customers) == 0
        assert customer_manager.add(customer_payload_factory()).id == 0

    def test_get_missing_customer(self, customer_manager):
        assert customer_manager.find(5) is None
        with pytest.raises(NotFound):
            customer_manager.get(5)

    def test_delete_customer(self, customer_manager, random_customer):
        assert customer_manager.delete(random_customer.id) == random_customer
        with pytest.raises(NotFound):
            customer_manager.get(random_customer.id)

    def test_delete_missing_customer(self, customer_manager):
        with pytest.raises(NotFound):
            customer_manager.delete(0)
