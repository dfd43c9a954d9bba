"""Add role use case."""

from relgrant.application.ports import PermissionChecker, TupleStore
from relgrant.application.use_cases.guards import require_grant, require_rank_over
from relgrant.domain.value_objects import Role, RoleCatalog
from relgrant.logging import get_logger

logger = get_logger(__name__)


class AddRoleUseCase:
    """Give a user a role on an object, replacing any role they held."""

    def __init__(
        self,
        store: TupleStore,
        permission_checker: PermissionChecker,
        catalog: RoleCatalog,
    ) -> None:
        self._store = store
        self._permission_checker = permission_checker
        self._catalog = catalog

    async def execute(self, editor: str | None, user: str, role: Role, object_id: str) -> None:
        """Assign role to user on object.

        A non-null editor must outrank both the user's current role and the
        new role, and must hold GRANT_X for every permission X the role
        bundles. Old role tuples are removed and the new one written as two
        separate store calls, so concurrent calls for the same user and
        object can race.
        """
        if editor is not None:
            await require_rank_over(
                self._permission_checker, self._catalog, editor, user, role, object_id
            )
            for permission in sorted(self._catalog.permissions_of(role)):
                await require_grant(self._permission_checker, editor, permission, object_id)

        for current in Role:
            await self._store.delete(subject=user, relation=current.value, object=object_id)
        await self._store.create(subject=user, relation=role.value, object=object_id)
        logger.info("role_added", editor=editor, user=user, role=str(role), object_id=object_id)
