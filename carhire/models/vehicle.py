from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .identity import Identity


@dataclass
class Vehicle:
    id: int
    make: str
    model: str
    year: int
    color: str
    created_at: datetime
    updated_at: Optional[datetime]
    owner: Identity
    is_booked: bool

    def serialize(self, router):
        return {
            "id": self.id,
            "url": router["vehicle"].url_for(id=str(self.id)).path,
            "make": self.make,
            "model": self.model,
            "year": self.year,
            "color": self.color,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "owner": str(self.owner),
            "is_booked": self.is_booked,
        }
