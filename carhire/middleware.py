"""
Middleware
----------
"""

from http import HTTPStatus

from aiohttp import web
from aiohttp.abc import Request
from aiohttp.web_middlewares import middleware

from carhire.models.identity import ANONYMOUS
from carhire.serializer import JSendStatus, JSendSchema
from carhire.service.verify_token import verify_token, TokenVerificationError

response_schema = JSendSchema()


@middleware
async def caller_identity_middleware(request: Request, handler):
    """
    Stores the identity of the caller on the request as the "caller".
    Requests without an Authorization header are made by the anonymous identity,
    and requests with an invalid one are rejected.
    """

    if "Authorization" in request.headers:
        try:
            request["caller"] = verify_token(request)
        except TokenVerificationError as error:
            return web.json_response(response_schema.dump({
                "status": JSendStatus.FAIL,
                "data": {
                    "message": "Supplied authorization token is invalid.",
                    "errors": list(error.args)
                }
            }), status=HTTPStatus.BAD_REQUEST)
    else:
        request["caller"] = ANONYMOUS

    return await handler(request)
