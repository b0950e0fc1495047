"""
Decorators
----------

This module defines some decorators that significantly reduce
the boilerplate when handling JSON IO. These are used on the
routes of the system to gracefully serialize, deserialize, and
validate the data coming in and out of the app.
"""

from functools import wraps
from http import HTTPStatus
from json import JSONDecodeError
from typing import Optional, Tuple, Union

from aiohttp import web
from aiohttp.web_urldispatcher import View
from marshmallow import Schema, ValidationError

from carhire.serializer.jsend import JSendSchema, JSendStatus


def _fail(message, status=HTTPStatus.BAD_REQUEST, **data):
    response_schema = JSendSchema()
    response_data = response_schema.dump({
        "status": JSendStatus.FAIL,
        "data": {"message": message, **data}
    })
    return web.json_response(response_data, status=status)


def expects(schema: Optional[Schema], into="data"):
    """
    A decorator that reads the JSON body of the request, asserts that it
    validates the given :class:`~marshmallow.Schema`, and stores the result
    on the request under the key supplied to the ``into`` parameter.

    Passing ``None`` as the schema accepts any JSON object as-is, leaving
    the validation of its fields to the service layer.

    .. code:: python

        @expects(ReservationRequestSchema(), "my_data")
        async def post(self):
            valid_data = self.request["my_data"]

    :param schema: The schema to validate, or None.
    :param into: The key to store the data in.
    """

    if schema is not None and not isinstance(schema, Schema):
        raise TypeError(f"Expected a Schema, got {type(schema)}")

    def decorator(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):

            # if the request is not JSON or missing, return a warning
            if not self.request.body_exists or not self.request.content_type == "application/json":
                return _fail(f"This route ({self.request.method}: {self.request.rel_url}) only accepts JSON.")

            try:
                data = await self.request.json()
            except JSONDecodeError as err:
                return _fail("Could not parse supplied JSON.", errors=list(err.args))

            if schema is None:
                if not isinstance(data, dict):
                    return _fail("The request body must be a JSON object.")
                self.request[into] = data
            else:
                try:
                    self.request[into] = schema.load(data)
                except ValidationError as err:
                    return _fail("The request did not validate properly.", errors=err.messages)

            return await original_function(self, **kwargs)

        return new_func

    return decorator


def returns(
    schema: Optional[Schema] = None, return_code: HTTPStatus = HTTPStatus.OK,
    **named_schema: Union[Schema, Tuple[Schema, HTTPStatus]]
):
    """
    A decorator that dumps the data returned from the route
    through the given :class:`~marshmallow.Schema`.

    As long as this decorator is applied to the route,
    it is possible to return plain python dictionaries.

    .. code:: python

        @returns(JSendSchema())
        async def get(self):
            result = do_stuff()
            return {
                "status": JSendStatus.SUCCESS,
                "data": result
            }

    When named schemas are given instead, the route returns a tuple of
    the schema name and the data.

    :param schema: The schema that the output data must conform to
    :param return_code: The code to return
    :param named_schema: Schema names, paired with their schema and return values.
    """

    # if no schema is defined, pass through
    if schema is None and not named_schema:
        return lambda x: x

    named_schema[None] = (schema, return_code)

    def decorator(original_function):

        @wraps(original_function)
        async def new_func(self: View, **kwargs):

            if schema:
                schema_name, response_data = None, await original_function(self, **kwargs)
            else:
                schema_name, response_data = await original_function(self, **kwargs)

            try:
                matched_schema = named_schema[schema_name]
                # if the named schema includes a return code as well, unwrap it
                if isinstance(matched_schema, tuple):
                    matched_schema, matched_return_code = matched_schema
                else:
                    matched_schema, matched_return_code = matched_schema, return_code
                if matched_return_code == HTTPStatus.NO_CONTENT:
                    return web.Response(status=matched_return_code)
                return web.json_response(matched_schema.dump(response_data), status=matched_return_code)
            except (ValidationError, KeyError) as err:
                response_schema = JSendSchema()
                response_data = response_schema.dump({
                    "status": JSendStatus.ERROR,
                    "data": err.messages if isinstance(err, ValidationError) else {"errors": list(err.args)},
                    "message": "We tried to send you data back, but it came out wrong.",
                })
                return web.json_response(response_data, status=HTTPStatus.INTERNAL_SERVER_ERROR)

        return new_func

    return decorator
