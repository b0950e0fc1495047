from datetime import datetime, timedelta
from random import getrandbits


def random_key(size):
    return bytes(getrandbits(8) for _ in range(size)).hex()


class FrozenClock:
    """A clock that only moves when told to."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs):
        self.now += timedelta(**kwargs)
