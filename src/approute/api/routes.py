"""Routes API endpoints.

Parses route paths into page descriptors and derives their URL paths.
"""

import json
import logging

from aiohttp import web

from approute.app_keys import routes_config_key
from approute.core.errors import SegmentError
from approute.core.page import AppPage
from approute.core.segments import PageType

logger = logging.getLogger(__name__)


def create_parse_routes() -> list[web.RouteDef]:
    return [
        web.post("/api/routes", build_route),
        web.get("/api/routes/{path:.*}", parse_route),
    ]


async def parse_route(request: web.Request) -> web.Response:
    path = request.match_info["path"]
    page_type = request.app[routes_config_key].default_page_type

    try:
        page = AppPage.parse_path(path)
        if page_type is not None:
            page.append(page_type)
    except SegmentError as e:
        logger.debug(f"Failed to parse route {path!r}: {e}")
        return _error_response(e)

    return web.json_response(_route_payload(page))


async def build_route(request: web.Request) -> web.Response:
    try:
        data = await request.json()
    except json.JSONDecodeError:
        return web.json_response({"error": "Invalid JSON body"}, status=400)

    if not isinstance(data, dict):
        return web.json_response({"error": "Body must be an object"}, status=400)

    tokens = data.get("segments")
    if not isinstance(tokens, list) or not all(isinstance(t, str) for t in tokens):
        return web.json_response(
            {"error": "segments must be a list of strings"},
            status=400,
        )

    page_type_raw = data.get("type", request.app[routes_config_key].default_page_type)
    if page_type_raw is not None and page_type_raw not in tuple(PageType):
        return web.json_response(
            {"error": f"Unknown page type: {page_type_raw}"},
            status=400,
        )

    page = AppPage()
    try:
        for token in tokens:
            page.append_token(token)
        if page_type_raw is not None:
            page.append(PageType(page_type_raw))
    except SegmentError as e:
        logger.debug(f"Failed to build route from {tokens!r}: {e}")
        return _error_response(e)

    return web.json_response(_route_payload(page))


def _route_payload(page: AppPage) -> dict[str, object]:
    path = page.to_path()
    return {
        "page": page.render(),
        "path": path.render(),
        "segments": page.to_dict()["segments"],
        "pathSegments": path.to_dict()["segments"],
    }


def _error_response(error: SegmentError) -> web.Response:
    return web.json_response({"error": str(error), "kind": error.kind}, status=400)
