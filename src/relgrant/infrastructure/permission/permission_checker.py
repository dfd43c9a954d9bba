"""Permission checker implementation - asks the tuple store."""

from collections.abc import Sequence
from typing import TypeVar

from relgrant.application.ports import TupleStore, UniquelyIdentifiable
from relgrant.domain.value_objects import DEFAULT_ROLE_CATALOG, Permission, Role, RoleCatalog

T = TypeVar("T", bound=UniquelyIdentifiable)


class TuplePermissionChecker:
    """Checks permissions and roles by delegating to the tuple store.

    Roles and permissions share the relation namespace, so both are
    checked by relation name. Subject-set resolution is left to the store.
    """

    def __init__(self, store: TupleStore, catalog: RoleCatalog = DEFAULT_ROLE_CATALOG) -> None:
        self._store = store
        self._catalog = catalog

    async def check_permission(self, user: str, permission: Permission, object_id: str) -> bool:
        """Check if user has permission on object."""
        return await self._store.check(user, permission.value, object_id)

    async def check_role(self, user: str, role: Role, object_id: str) -> bool:
        """Check if user has role on object."""
        return await self._store.check(user, role.value, object_id)

    async def check_grant_permission(
        self, user: str, permission: Permission, object_id: str
    ) -> bool:
        """Check if user may grant or revoke permission on object."""
        return await self.check_permission(user, permission.grant_permission, object_id)

    async def get_role(self, user: str, object_id: str) -> Role | None:
        """Highest ranked role user holds on object, or None."""
        for role in self._catalog.roles_by_rank(descending=True):
            if await self.check_role(user, role, object_id):
                return role
        return None

    async def filter(self, user: str, permission: Permission, candidates: Sequence[T]) -> list[T]:
        """Candidates user holds permission on, in input order."""
        allowed = []
        for candidate in candidates:
            if await self.check_permission(user, permission, str(candidate.uuid)):
                allowed.append(candidate)
        return allowed
