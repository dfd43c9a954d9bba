"""Port for items identified by a UUID."""

from typing import Protocol
from uuid import UUID


class UniquelyIdentifiable(Protocol):
    """Anything carrying the UUID its permissions are stored under."""

    @property
    def uuid(self) -> UUID | str: ...
