"""
.. autoclasstree:: carhire.permissions

This module contains the various permission types. A permission is an object
that is called with the caller's identity and the records in question, and
raises a PermissionDenied in the case of a failed permission.
"""

from carhire.permissions.permission import Permission, PermissionDenied
from carhire.permissions.vehicles import CallerOwnsVehicle
