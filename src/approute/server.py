"""aiohttp server for Approute.

Application factory and route registration for the routes API.
"""

import logging

from aiohttp import web

from approute.api.routes import create_parse_routes
from approute.app_keys import routes_config_key
from approute.config import Config

logger = logging.getLogger(__name__)


def create_app(config: Config) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    app[routes_config_key] = config.routes

    app.router.add_routes(create_parse_routes())

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    logger.info(f"Serving routes API on {config.server.host}:{config.server.port}")
    web.run_app(app, host=config.server.host, port=config.server.port)
