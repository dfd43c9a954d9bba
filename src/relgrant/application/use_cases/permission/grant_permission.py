"""Grant permission use case."""

from relgrant.application.ports import PermissionChecker, TupleStore
from relgrant.application.use_cases.guards import require_grant
from relgrant.domain.value_objects import ANONYMOUS_USER, Permission, Role
from relgrant.logging import get_logger

logger = get_logger(__name__)


class GrantPermissionUseCase:
    """Grant a single permission on an object to a user, a role or everyone."""

    def __init__(
        self,
        store: TupleStore,
        permission_checker: PermissionChecker,
        anonymous_user: str = ANONYMOUS_USER,
    ) -> None:
        self._store = store
        self._permission_checker = permission_checker
        self._anonymous_user = anonymous_user

    async def to_user(
        self, editor: str | None, user: str, permission: Permission, object_id: str
    ) -> None:
        """Grant permission to user. Editor must hold the matching GRANT_*."""
        if editor is not None:
            await require_grant(self._permission_checker, editor, permission, object_id)

        await self._store.create(subject=user, relation=permission.value, object=object_id)
        logger.info(
            "permission_granted",
            editor=editor,
            user=user,
            permission=str(permission),
            object_id=object_id,
        )

    async def to_role(
        self, editor: str | None, role: Role, permission: Permission, object_id: str
    ) -> None:
        """Grant permission to every holder of role on the same object."""
        if editor is not None:
            await require_grant(self._permission_checker, editor, permission, object_id)

        await self._store.create(
            relation=permission.value,
            object=object_id,
            set_object=object_id,
            set_relation=role.value,
        )
        logger.info(
            "permission_granted",
            editor=editor,
            role=str(role),
            permission=str(permission),
            object_id=object_id,
        )

    async def to_anonymous(
        self, editor: str | None, permission: Permission, object_id: str
    ) -> None:
        """Grant permission to unauthenticated callers."""
        await self.to_user(editor, self._anonymous_user, permission, object_id)
