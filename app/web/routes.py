"""
Estimator HTTP routes.

JSON API over the estimator session. The same endpoints accept HTML form
posts from the index page and redirect back to it.
"""

from typing import Any

from aiohttp import web
from loguru import logger

from app.utils.exceptions import InvalidBoostError, InvalidInputMethodError
from app.web.keys import ESTIMATOR_KEY
from app.web.page import render_page


FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def _read_payload(request: web.Request) -> tuple[dict[str, Any], bool]:
    """
    Read request body.

    Returns:
        Tuple of (payload, is_form_post)
    """
    if request.content_type in FORM_CONTENT_TYPES:
        form = await request.post()
        return dict(form), True

    if not request.can_read_body:
        return {}, False

    try:
        data = await request.json()
    except ValueError as e:
        raise web.HTTPBadRequest(
            text='{"error": "Invalid JSON body"}',
            content_type="application/json",
        ) from e
    if not isinstance(data, dict):
        raise web.HTTPBadRequest(
            text='{"error": "JSON body must be an object"}',
            content_type="application/json",
        )
    return data, False


def _parse_multiplier(value: Any) -> int:
    """Read a whole-number boost multiplier from a JSON value or form field."""
    if isinstance(value, bool):
        raise TypeError(f"Boolean is not a multiplier: {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"Multiplier must be a whole number: {value!r}")
    return int(value)


def _respond(request: web.Request, is_form: bool) -> web.Response:
    if is_form:
        raise web.HTTPFound("/")
    return web.json_response(request.app[ESTIMATOR_KEY].snapshot())


def _bad_request(message: str, is_form: bool) -> web.Response:
    if is_form:
        return web.Response(text=message, status=400)
    return web.json_response({"error": message}, status=400)


async def index(request: web.Request) -> web.Response:
    """Render the estimator page."""
    snapshot = request.app[ESTIMATOR_KEY].snapshot()
    return web.Response(text=render_page(snapshot), content_type="text/html")


async def get_state(request: web.Request) -> web.Response:
    """Return current estimator view."""
    return web.json_response(request.app[ESTIMATOR_KEY].snapshot())


async def submit_manual_points(request: web.Request) -> web.Response:
    """Calculate reward from manually entered points."""
    payload, is_form = await _read_payload(request)
    request.app[ESTIMATOR_KEY].submit_manual_points(payload.get("points"))
    return _respond(request, is_form)


async def submit_address(request: web.Request) -> web.Response:
    """Look up staking points of an address and calculate reward."""
    payload, is_form = await _read_payload(request)
    address = payload.get("address")
    if address is not None and not isinstance(address, str):
        return _bad_request("Address must be a string", is_form)
    await request.app[ESTIMATOR_KEY].submit_address(address)
    return _respond(request, is_form)


async def select_boost(request: web.Request) -> web.Response:
    """Apply boost multiplier to the displayed reward."""
    payload, is_form = await _read_payload(request)
    try:
        multiplier = _parse_multiplier(payload.get("multiplier"))
        request.app[ESTIMATOR_KEY].select_boost(multiplier)
    except (InvalidBoostError, TypeError, ValueError) as e:
        logger.debug(f"Rejected boost selection {payload.get('multiplier')!r}: {e}")
        return _bad_request(f"Invalid boost multiplier: {payload.get('multiplier')!r}", is_form)
    return _respond(request, is_form)


async def toggle_breakdown(request: web.Request) -> web.Response:
    """Show or hide the calculation breakdown."""
    _, is_form = await _read_payload(request)
    request.app[ESTIMATOR_KEY].toggle_breakdown()
    return _respond(request, is_form)


async def switch_input_method(request: web.Request) -> web.Response:
    """Select address or manual input form."""
    payload, is_form = await _read_payload(request)
    try:
        request.app[ESTIMATOR_KEY].switch_input_method(str(payload.get("method")))
    except InvalidInputMethodError as e:
        return _bad_request(str(e), is_form)
    return _respond(request, is_form)


def setup_routes(app: web.Application) -> None:
    """Register estimator routes."""
    app.router.add_get("/", index)
    app.router.add_get("/api/state", get_state)
    app.router.add_post("/api/points/manual", submit_manual_points)
    app.router.add_post("/api/points/address", submit_address)
    app.router.add_post("/api/boost", select_boost)
    app.router.add_post("/api/breakdown/toggle", toggle_breakdown)
    app.router.add_post("/api/input-method", switch_input_method)
