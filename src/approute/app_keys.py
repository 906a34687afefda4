"""Application keys for type-safe app configuration access."""

from aiohttp import web

from approute.config import RoutesConfig

routes_config_key = web.AppKey("routes_config", RoutesConfig)
