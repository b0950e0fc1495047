"""
Validation
----------

Runs caller-supplied payloads through their marshmallow schemas before
any service touches the store.
"""

from typing import Any, Dict, List

from marshmallow import Schema, ValidationError

from carhire.service.errors import ValidationFailed


def flatten_messages(messages, prefix="") -> List[str]:
    """Flattens marshmallow's nested error messages into ``field: message`` lines."""
    if isinstance(messages, dict):
        lines = []
        for key, value in messages.items():
            if key == "_schema":
                name = prefix
            elif prefix:
                name = f"{prefix}.{key}"
            else:
                name = str(key)
            lines += flatten_messages(value, name)
        return lines
    if isinstance(messages, (list, tuple)):
        lines = []
        for message in messages:
            lines += flatten_messages(message, prefix)
        return lines
    return [f"{prefix}: {messages}" if prefix else str(messages)]


def validate(schema: Schema, payload: Any) -> Dict[str, Any]:
    """
    Loads the payload with the schema.

    :raises ValidationFailed: With every validation message if the payload is invalid.
    """
    try:
        return schema.load(payload)
    except ValidationError as error:
        raise ValidationFailed("; ".join(flatten_messages(error.messages))) from error
