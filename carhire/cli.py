"""
The entry point for the CLI tool
"""

import uvloop
from aiohttp import web

from carhire import logger
from carhire.app import build_app
from carhire.config import store_path, host, port
from carhire.version import __version__, name


def run():
    """Builds the app from the environment and runs it."""
    logger.info(f'Starting {name} %s!', __version__)
    web.run_app(build_app(store_path), host=host, port=port, loop=uvloop.new_event_loop())


if __name__ == '__main__':
    run()
