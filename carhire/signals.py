"""
Signals
-------

Defines the signals that the aiohttp server uses to
manage the lifetime of the record store.

Each signal must accept the ``app`` argument.
"""

from aiohttp.abc import Application

from carhire import logger


async def log_store_contents(app: Application):
    """Logs what the store holds when the server starts."""
    storage = app["storage"]
    logger.info(
        "Store holds %s vehicle(s), %s customer(s), and %s reservation(s)",
        len(storage.vehicles), len(storage.customers), len(storage.reservations)
    )


async def close_storage(app: Application):
    """Closes the backing memory of the record store."""
    logger.info("Closing record store")
    app["storage"].close()


def register_signals(app: Application):
    """Registers all the signals at the appropriate hooks."""
    app.on_startup.append(log_store_contents)
    app.on_cleanup.append(close_storage)
