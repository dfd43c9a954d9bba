"""Collection membership use cases."""

from relgrant.application.ports import PermissionChecker, TupleStore
from relgrant.application.use_cases.guards import require_permission
from relgrant.domain.value_objects import Permission, Role
from relgrant.logging import get_logger

logger = get_logger(__name__)

# Relations a member object inherits from its collection.
MIRRORED_RELATIONS: tuple[str, ...] = tuple(p.value for p in Permission) + tuple(
    r.value for r in Role
)


async def _require_membership_change(
    checker: PermissionChecker, editor: str | None, object_id: str, collection_id: str
) -> None:
    if editor is None:
        return
    await require_permission(checker, editor, Permission.ASSOCIATE, object_id)
    await require_permission(checker, editor, Permission.UPDATE, collection_id)


class AddToCollectionUseCase:
    """Add an object to a collection so it inherits the collection's grants."""

    def __init__(self, store: TupleStore, permission_checker: PermissionChecker) -> None:
        self._store = store
        self._permission_checker = permission_checker

    async def execute(self, editor: str | None, object_id: str, collection_id: str) -> None:
        """Mirror every permission and role of collection onto object.

        Editor needs ASSOCIATE on the object and UPDATE on the collection.
        Tuples are written one by one; a failure leaves a partial mirror.
        """
        await _require_membership_change(
            self._permission_checker, editor, object_id, collection_id
        )

        for relation in MIRRORED_RELATIONS:
            await self._store.create(
                relation=relation,
                object=object_id,
                set_object=collection_id,
                set_relation=relation,
            )
        logger.info(
            "added_to_collection", editor=editor, object_id=object_id, collection_id=collection_id
        )


class RemoveFromCollectionUseCase:
    """Remove an object from a collection. Exact inverse of AddToCollectionUseCase."""

    def __init__(self, store: TupleStore, permission_checker: PermissionChecker) -> None:
        self._store = store
        self._permission_checker = permission_checker

    async def execute(self, editor: str | None, object_id: str, collection_id: str) -> None:
        """Delete every mirrored relation from collection onto object."""
        await _require_membership_change(
            self._permission_checker, editor, object_id, collection_id
        )

        for relation in MIRRORED_RELATIONS:
            await self._store.delete(
                relation=relation,
                object=object_id,
                set_object=collection_id,
                set_relation=relation,
            )
        logger.info(
            "removed_from_collection",
            editor=editor,
            object_id=object_id,
            collection_id=collection_id,
        )
