"""Authorization preconditions shared by the use cases.

Every guard raises AuthorizationError (after logging the denial) and
never touches the tuple store beyond read-only checks.
"""

from typing import NoReturn

from relgrant.application.ports import PermissionChecker
from relgrant.domain.exceptions import AuthorizationError
from relgrant.domain.value_objects import Permission, Role, RoleCatalog
from relgrant.logging import get_logger

logger = get_logger(__name__)


def _deny(message: str, user: str, permission: Permission | Role, object_id: str) -> NoReturn:
    logger.warning(
        "authorization_denied",
        user=user,
        permission=str(permission),
        object_id=object_id,
        reason=message,
    )
    raise AuthorizationError(message, user=user, permission=permission, object_id=object_id)


async def require_permission(
    checker: PermissionChecker, editor: str, permission: Permission, object_id: str
) -> None:
    """Editor must hold permission on object."""
    if not await checker.check_permission(editor, permission, object_id):
        _deny(
            f"User {editor} does not have permission to {permission} on object {object_id}",
            editor,
            permission,
            object_id,
        )


async def require_grant(
    checker: PermissionChecker, editor: str, permission: Permission, object_id: str
) -> None:
    """Editor must hold the GRANT_* permission gating permission on object."""
    grant = permission.grant_permission
    if not await checker.check_grant_permission(editor, permission, object_id):
        _deny(f"User {editor} lacks {grant} on object {object_id}", editor, grant, object_id)


async def require_rank_over(
    checker: PermissionChecker,
    catalog: RoleCatalog,
    editor: str,
    user: str,
    role: Role,
    object_id: str,
) -> None:
    """Editor must outrank both the user's current role and the target role."""
    editor_role = await checker.get_role(editor, object_id)
    if editor_role is None:
        _deny(f"User {editor} has no role on object {object_id}", editor, role, object_id)

    user_role = await checker.get_role(user, object_id)
    if user_role is not None and not catalog.is_superior(editor_role, user_role):
        _deny(
            f"User {editor} ({editor_role}) cannot change the role of {user} ({user_role})",
            editor,
            user_role,
            object_id,
        )

    if not catalog.is_superior(editor_role, role):
        _deny(
            f"User {editor} ({editor_role}) cannot assign or remove role {role}",
            editor,
            role,
            object_id,
        )
