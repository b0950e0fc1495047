"""
Errors
------

The recoverable errors that the services raise. Each carries a
human-readable message that is safe to show to the caller.

Storage errors (:class:`~carhire.store.exceptions.StoreError`) are not
part of this hierarchy: no caller can recover from them.
"""


class ServiceError(Exception):

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationFailed(ServiceError):
    """The supplied payload is malformed. Nothing was changed."""


class NotFound(ServiceError):
    """A referenced record does not exist."""


class NotAuthorized(ServiceError):
    """The caller is not allowed to modify the record."""


class AlreadyBooked(ServiceError):
    """The vehicle is already booked."""
