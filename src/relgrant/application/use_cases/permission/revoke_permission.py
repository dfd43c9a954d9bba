"""Revoke permission use case."""

from relgrant.application.ports import PermissionChecker, TupleStore
from relgrant.application.use_cases.guards import require_grant
from relgrant.domain.value_objects import ANONYMOUS_USER, Permission, Role
from relgrant.logging import get_logger

logger = get_logger(__name__)


class RevokePermissionUseCase:
    """Revoke a directly granted permission. Inverse of GrantPermissionUseCase."""

    def __init__(
        self,
        store: TupleStore,
        permission_checker: PermissionChecker,
        anonymous_user: str = ANONYMOUS_USER,
    ) -> None:
        self._store = store
        self._permission_checker = permission_checker
        self._anonymous_user = anonymous_user

    async def from_user(
        self, editor: str | None, user: str, permission: Permission, object_id: str
    ) -> None:
        """Revoke permission from user. Editor must hold the matching GRANT_*."""
        if editor is not None:
            await require_grant(self._permission_checker, editor, permission, object_id)

        await self._store.delete(subject=user, relation=permission.value, object=object_id)
        logger.info(
            "permission_revoked",
            editor=editor,
            user=user,
            permission=str(permission),
            object_id=object_id,
        )

    async def from_role(
        self, editor: str | None, role: Role, permission: Permission, object_id: str
    ) -> None:
        """Revoke permission from the holders of role on the object."""
        if editor is not None:
            await require_grant(self._permission_checker, editor, permission, object_id)

        await self._store.delete(
            relation=permission.value,
            object=object_id,
            set_object=object_id,
            set_relation=role.value,
        )
        logger.info(
            "permission_revoked",
            editor=editor,
            role=str(role),
            permission=str(permission),
            object_id=object_id,
        )

    async def from_anonymous(
        self, editor: str | None, permission: Permission, object_id: str
    ) -> None:
        """Revoke permission from unauthenticated callers."""
        await self.from_user(editor, self._anonymous_user, permission, object_id)
