"""
Customer Related Views
-------------------------

Customers can be added, fetched, and deleted by anyone.
"""
from http import HTTPStatus

from carhire.serializer import JSendStatus, JSendSchema, expects, returns
from carhire.serializer.models import CustomerSchema
from carhire.views.base import BaseView
from carhire.views.decorators import match_ids, handles_errors


class CustomersView(BaseView):
    url = "/customers"

    @handles_errors
    @expects(None)
    @returns(JSendSchema.of(customer=CustomerSchema()), HTTPStatus.CREATED)
    async def post(self):
        customer = self.customer_manager.add(self.request["data"])
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"customer": customer.serialize(self.request.app.router)}
        }


class CustomerView(BaseView):
    url = "/customers/{id}"
    name = "customer"

    @handles_errors
    @match_ids(customer_id="id")
    @returns(JSendSchema.of(customer=CustomerSchema()))
    async def get(self, customer_id: int):
        customer = self.customer_manager.get(customer_id)
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"customer": customer.serialize(self.request.app.router)}
        }

    @handles_errors
    @match_ids(customer_id="id")
    @returns(JSendSchema.of(customer=CustomerSchema()))
    async def delete(self, customer_id: int):
        customer = self.customer_manager.delete(customer_id)
        return {
            "status": JSendStatus.SUCCESS,
            "data": {"customer": customer.serialize(self.request.app.router)}
        }
