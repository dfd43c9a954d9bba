"""Permission checker port - answers questions about the tuple graph."""

from collections.abc import Sequence
from typing import Protocol, TypeVar

from relgrant.application.ports.identifiable import UniquelyIdentifiable
from relgrant.domain.value_objects import Permission, Role

T = TypeVar("T", bound=UniquelyIdentifiable)


class PermissionChecker(Protocol):
    """Port for checking user permissions and roles on objects."""

    async def check_permission(self, user: str, permission: Permission, object_id: str) -> bool: ...

    async def check_role(self, user: str, role: Role, object_id: str) -> bool: ...

    async def check_grant_permission(
        self, user: str, permission: Permission, object_id: str
    ) -> bool: ...

    async def get_role(self, user: str, object_id: str) -> Role | None: ...

    async def filter(self, user: str, permission: Permission, candidates: Sequence[T]) -> list[T]: ...
