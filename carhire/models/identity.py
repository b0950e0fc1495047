"""
Identity
--------

The identity of a caller, as recorded on the records they own.
"""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Identity:
    """
    An opaque principal. Two identities are the same caller if and only
    if their principal bytes are equal.
    """

    principal: bytes

    def __post_init__(self):
        if not isinstance(self.principal, bytes):
            raise TypeError(f"Principal must be bytes, not {type(self.principal)}")

    @classmethod
    def from_hex(cls, text: str) -> 'Identity':
        """
        Creates an identity from its hex representation.

        :raises ValueError: If the text is not valid hex.
        """
        return cls(bytes.fromhex(text))

    def __str__(self):
        return self.principal.hex()


ANONYMOUS = Identity(b"\x04")
"""The identity of a caller that did not authenticate."""

Identity.ANONYMOUS = ANONYMOUS
