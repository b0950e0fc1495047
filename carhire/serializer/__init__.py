"""
.. autoclasstree:: carhire.serializer

The serializer package houses all the schemas for the input/output in the system.
The serializers are used to generate and validate any raw data (such as JSON)
going in and out of the system.
"""

from .fields import IdentityField, EnumField, Many
from .jsend import JSendSchema, JSendStatus
from .decorators import expects, returns
