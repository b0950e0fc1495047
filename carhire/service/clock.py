from datetime import datetime, timezone
from typing import Callable

Clock = Callable[[], datetime]
"""A function returning the current time as an aware datetime."""


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
