"""Global creation capabilities, stored as CREATE on sentinel objects."""

from relgrant.application.ports import PermissionChecker, TupleStore
from relgrant.application.use_cases.guards import require_grant
from relgrant.domain.value_objects import (
    DATASETS_ADMINISTRATION,
    MACHINE_LEARNING_MODEL_ADMINISTRATION,
    Permission,
)
from relgrant.logging import get_logger

logger = get_logger(__name__)


class CreationPermissionUseCase:
    """Check, grant and revoke CREATE on one administration object."""

    def __init__(
        self,
        store: TupleStore,
        permission_checker: PermissionChecker,
        administration_object: str,
    ) -> None:
        self._store = store
        self._permission_checker = permission_checker
        self._object = administration_object

    async def check(self, user: str) -> bool:
        return await self._permission_checker.check_permission(
            user, Permission.CREATE, self._object
        )

    async def grant(self, editor: str | None, user: str) -> None:
        """Let user create new items. A given editor needs GRANT_CREATE."""
        if editor is not None:
            await require_grant(self._permission_checker, editor, Permission.CREATE, self._object)

        await self._store.create(subject=user, relation=Permission.CREATE.value, object=self._object)
        logger.info("creation_permission_granted", editor=editor, user=user, scope=self._object)

    async def revoke(self, editor: str | None, user: str) -> None:
        if editor is not None:
            await require_grant(self._permission_checker, editor, Permission.CREATE, self._object)

        await self._store.delete(subject=user, relation=Permission.CREATE.value, object=self._object)
        logger.info("creation_permission_revoked", editor=editor, user=user, scope=self._object)


def dataset_creation(
    store: TupleStore, permission_checker: PermissionChecker
) -> CreationPermissionUseCase:
    return CreationPermissionUseCase(store, permission_checker, DATASETS_ADMINISTRATION)


def machine_learning_model_creation(
    store: TupleStore, permission_checker: PermissionChecker
) -> CreationPermissionUseCase:
    return CreationPermissionUseCase(
        store, permission_checker, MACHINE_LEARNING_MODEL_ADMINISTRATION
    )
