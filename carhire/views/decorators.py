"""
Decorators
-------------------------
"""
from functools import wraps
from http import HTTPStatus
from typing import Any, Dict

from aiohttp import web
from aiohttp.web_request import Request
from aiohttp.web_urldispatcher import View

from carhire.serializer import JSendStatus, JSendSchema
from carhire.service import ServiceError, ValidationFailed, NotFound, NotAuthorized, AlreadyBooked

ERROR_STATUSES = {
    ValidationFailed: HTTPStatus.BAD_REQUEST,
    NotFound: HTTPStatus.NOT_FOUND,
    NotAuthorized: HTTPStatus.UNAUTHORIZED,
    AlreadyBooked: HTTPStatus.CONFLICT,
}
"""The response code for each of the service errors."""

MAX_ID = 2 ** 64 - 1


def resolve_match_map(request: Request, match_map) -> Dict[str, Any]:
    resolved_matches = {}
    errors = []

    for key, value in match_map.items():
        param = request.match_info.get(value)
        try:
            resolved = int(param)
        except (ValueError, TypeError):
            errors.append(f'Could not convert url parameter "{param}" to an id.')
            continue
        if not 0 <= resolved <= MAX_ID:
            errors.append(f'Url parameter "{param}" is not a valid id.')
            continue
        resolved_matches[key] = resolved

    if errors:
        raise ValueError(*errors)
    return resolved_matches


def match_ids(**match_map: str):
    """
    Converts url variables to record ids and passes them to the route,
    or 400's if they are not ids.

    .. code-block:: python

        # example usage
        @match_ids(vehicle_id="id")
        async def get(self, vehicle_id: int)
            ...

    :param match_map: Associates a kwarg on the route to a url variable.
    """

    def attach_ids(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):
            try:
                params = resolve_match_map(self.request, match_map)
            except ValueError as error:
                response = {
                    "status": JSendStatus.FAIL,
                    "data": {
                        "message": "Errors with your request.",
                        "errors": list(error.args)
                    }
                }
                raise web.HTTPBadRequest(text=JSendSchema().dumps(response), content_type='application/json')

            return await original_function(self, **kwargs, **params)

        return new_func

    return attach_ids


def handles_errors(original_function):
    """
    Converts the errors raised by the service layer into
    JSend failures with the appropriate response code.
    """

    @wraps(original_function)
    async def new_func(self: View, **kwargs):
        try:
            return await original_function(self, **kwargs)
        except ServiceError as error:
            return web.json_response(JSendSchema().dump({
                "status": JSendStatus.FAIL,
                "data": {
                    "message": error.message,
                    "reason": type(error).__name__,
                }
            }), status=ERROR_STATUSES.get(type(error), HTTPStatus.BAD_REQUEST))

    return new_func
