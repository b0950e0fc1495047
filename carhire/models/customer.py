from dataclasses import dataclass


@dataclass
class Customer:
    id: int
    name: str
    contact: str

    def serialize(self, router):
        return {
            "id": self.id,
            "url": router["customer"].url_for(id=str(self.id)).path,
            "name": self.name,
            "contact": self.contact,
        }
