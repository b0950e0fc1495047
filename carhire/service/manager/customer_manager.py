"""
Customer Manager
================

Handles the creation and removal of customers. Customers have no owner,
so any caller may delete any customer.
"""

from typing import Any, Mapping, Optional

from carhire import logger
from carhire.models import Customer
from carhire.serializer.models import CustomerPayloadSchema
from carhire.service.errors import NotFound
from carhire.service.validation import validate
from carhire.store import Storage


class CustomerManager:

    def __init__(self, storage: Storage):
        self._customers = storage.customers
        self._ids = storage.customer_ids
        self._payload_schema = CustomerPayloadSchema()

    def find(self, customer_id: int) -> Optional[Customer]:
        return self._customers.get(customer_id)

    def get(self, customer_id: int) -> Customer:
        """:raises NotFound: If there is no such customer."""
        customer = self.find(customer_id)
        if customer is None:
            raise NotFound(f"a customer with id={customer_id} not found")
        return customer

    def add(self, payload: Mapping[str, Any]) -> Customer:
        """
        Adds a customer with the next customer id.

        :raises ValidationFailed: If the payload is invalid.
        :raises RecordTooLargeError: If the customer is too large to store. Nothing is stored.
        """
        data = validate(self._payload_schema, payload)

        customer = Customer(id=self._ids.current(), name=data["name"], contact=data["contact"])
        self._customers.insert(customer.id, customer)
        self._ids.next()
        logger.info("Customer %s added", customer.id)
        return customer

    def delete(self, customer_id: int) -> Customer:
        """
        Removes a customer, returning it. Reservations made by the
        customer are left in place.

        :raises NotFound: If there is no such customer.
        """
        customer = self._customers.remove(customer_id)
        if customer is None:
            raise NotFound(f"a customer with id={customer_id} not found")
        logger.info("Customer %s deleted", customer_id)
        return customer
