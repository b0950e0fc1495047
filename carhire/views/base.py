"""
Base
------------------------

The base view for the API. This view contains functionality
required in all other views.
"""

from typing import Optional

from aiohttp.abc import Application
from aiohttp.web import View, AbstractRoute
from aiohttp_cors import CorsConfig, CorsViewMixin

from carhire.models import Identity
from carhire.service import VehicleManager, CustomerManager, ReservationManager


class ViewConfigurationError(Exception):
    """
    Raised if the view doesn't provide a URL.
    """


class BaseView(View, CorsViewMixin):
    """
    The base view that all other views extend. Contains some useful
    helper functions that the extending classes can use.
    """

    url: str
    name: Optional[str]
    route: AbstractRoute

    @classmethod
    def register_route(cls, app: Application, base: Optional[str] = None):
        """
        Registers the view with the given router.

        :raises ViewConfigurationError: If the URL hasn't been set on the given view.
        """
        try:
            url = base + cls.url if base is not None else cls.url
        except AttributeError:
            raise ViewConfigurationError("No URL provided!")

        kwargs = {}
        name = getattr(cls, "name", None)
        if name is not None:
            kwargs["name"] = name

        cls.route = app.router.add_view(url, cls, **kwargs)

    @classmethod
    def enable_cors(cls, cors: CorsConfig):
        """Enables CORS on the view."""
        try:
            cors.add(cls.route)
        except AttributeError as error:
            raise ViewConfigurationError("No route assigned. Please register the route first.") from error

    @property
    def caller(self) -> Identity:
        """The identity stored on the request by the caller identity middleware."""
        return self.request["caller"]

    @property
    def vehicle_manager(self) -> VehicleManager:
        return self.request.app["vehicle_manager"]

    @property
    def customer_manager(self) -> CustomerManager:
        return self.request.app["customer_manager"]

    @property
    def reservation_manager(self) -> ReservationManager:
        return self.request.app["reservation_manager"]
