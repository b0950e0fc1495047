"""
.. autoclasstree:: carhire.views

This package contains the server API for adding, updating,
reserving, and removing vehicles and customers.

API Conventions
---------------

The API conforms as best as possible to the REST standard:

* Be ordered in terms of resources (nouns such as vehicle)
* Accept and return JSON with snake_case key naming
* Have idempotent GET, PUT, and DELETE operations

API Expected Responses
----------------------

The server responds with JSend formatted JSON to all requests, except
for cancelling a reservation, which responds with a 204 no content.
"""

import aiohttp_cors
from aiohttp.abc import Application

from carhire import logger
from .customers import CustomerView, CustomersView
from .reservations import ReservationView, ReservationsView
from .vehicles import VehicleView, VehiclesView, VehicleBookedView

views = [
    VehiclesView, VehicleView, VehicleBookedView,
    CustomersView, CustomerView,
    ReservationsView, ReservationView,
]


def register_views(app: Application, base: str):
    """
    Registers all the API views onto the given router at a specific root url.

    :param app: The app to register the views to.
    :param base: The base URL.
    """
    cors = aiohttp_cors.setup(app, defaults={
        "*": aiohttp_cors.ResourceOptions(
            allow_credentials=True,
            expose_headers="*",
            allow_headers="*",
            allow_methods="*",
        )
    })

    for view in views:
        logger.info("Registered %s at %s", view.__name__, base + view.url)
        view.register_route(app, base)
        view.enable_cors(cors)
