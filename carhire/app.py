"""
App
-----
"""

from typing import Optional

from aiohttp import web

from carhire.config import api_root, bucket_pages
from carhire.middleware import caller_identity_middleware
from carhire.service import VehicleManager, CustomerManager, ReservationManager
from carhire.service.clock import Clock, utcnow
from carhire.service.verify_token import DummyVerifier
from carhire.signals import register_signals
from carhire.store import Storage
from carhire.views import register_views


def build_app(store_path: Optional[str] = None, *, storage: Optional[Storage] = None, clock: Clock = utcnow):
    """
    Sets up the app around a record store.

    :param store_path: The file to keep the records in, or None to keep them in memory.
    :param storage: An already opened store, used instead of ``store_path``.
    :param clock: The source of timestamps for new and updated records.
    """
    app = web.Application(middlewares=[caller_identity_middleware])

    if storage is None:
        storage = Storage.open(store_path, bucket_pages=bucket_pages)

    app['storage'] = storage
    app['vehicle_manager'] = VehicleManager(storage, clock)
    app['customer_manager'] = CustomerManager(storage)
    app['reservation_manager'] = ReservationManager(
        storage, app['vehicle_manager'], app['customer_manager'], clock
    )
    app['token_verifier'] = DummyVerifier()

    register_signals(app)
    register_views(app, api_root)

    return app
