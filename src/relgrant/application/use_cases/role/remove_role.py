"""Remove role use case."""

from relgrant.application.ports import PermissionChecker, TupleStore
from relgrant.application.use_cases.guards import require_rank_over
from relgrant.domain.value_objects import Role, RoleCatalog
from relgrant.logging import get_logger

logger = get_logger(__name__)


class RemoveRoleUseCase:
    """Take a role away from a user on an object."""

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
        """Remove role from user. Editor must outrank the user and the role."""
        if editor is not None:
            await require_rank_over(
                self._permission_checker, self._catalog, editor, user, role, object_id
            )

        await self._store.delete(subject=user, relation=role.value, object=object_id)
        logger.info("role_removed", editor=editor, user=user, role=str(role), object_id=object_id)
