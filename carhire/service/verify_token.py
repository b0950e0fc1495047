"""
Verify Token
------------

Turns the bearer token of a request into the identity of the caller.
"""
from abc import ABC, abstractmethod

from aiohttp.web_request import Request

from carhire.models import Identity


class TokenVerificationError(Exception):
    pass


class TokenVerifier(ABC):

    @abstractmethod
    def verify_token(self, token: str) -> Identity:
        """
        Given a token, verifies it, returning the identity it belongs to.

        :raises TokenVerificationError: When the provided token is invalid.
        """


class DummyVerifier(TokenVerifier):
    """
    Accepts any non-empty hex string, treating the decoded bytes as the principal.
    """

    def verify_token(self, token: str) -> Identity:
        if not isinstance(token, str):
            raise TokenVerificationError(f"Token must be of type string, not {type(token)}")

        try:
            identity = Identity.from_hex(token)
        except ValueError:
            raise TokenVerificationError("Not a valid hex string.")

        if not identity.principal:
            raise TokenVerificationError("Token is empty.")
        return identity


def verify_token(request: Request) -> Identity:
    """
    Checks a request for a valid Authorization header.

    :param request: The request to check.
    :return: The identity of the caller.
    :raises TokenVerificationError: When the Authorization header is missing or invalid.
    """
    if "Authorization" not in request.headers:
        raise TokenVerificationError("You must supply your token.")

    if not request.headers["Authorization"].startswith("Bearer "):
        raise TokenVerificationError("The Authorization header must be of the format \"Bearer $TOKEN\".")

    return request.app["token_verifier"].verify_token(request.headers["Authorization"][7:])
