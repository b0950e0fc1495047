"""
Permission
----------
"""

from abc import ABC, abstractmethod

from carhire.models import Identity


class PermissionDenied(Exception):

    def __str__(self):
        """Prints a friendly description of the error."""
        return ", ".join(str(m).lower().strip(".") for m in self.args)


class Permission(ABC):
    """
    The base class for permissions.
    """

    @abstractmethod
    def __call__(self, caller: Identity, **kwargs) -> None:
        """
        Evaluates the permission for the caller against the given records.

        :raises PermissionDenied: If the permission failed.
        """
