"""Delete object use case."""

from relgrant.application.ports import PermissionChecker, TupleStore
from relgrant.application.use_cases.collection.membership import MIRRORED_RELATIONS
from relgrant.application.use_cases.guards import require_permission
from relgrant.domain.entities import RelationTuple
from relgrant.domain.value_objects import Permission
from relgrant.logging import get_logger

logger = get_logger(__name__)


class DeleteObjectUseCase:
    """Remove every tuple an object takes part in."""

    def __init__(self, store: TupleStore, permission_checker: PermissionChecker) -> None:
        self._store = store
        self._permission_checker = permission_checker

    async def execute(self, editor: str | None, object_id: str) -> int:
        """Delete tuples on object and tuples inheriting from it.

        Editor needs DELETE on the object. Matching tuples are fetched once
        and then deleted one at a time, without a transaction. Returns the
        number of tuples deleted.
        """
        if editor is not None:
            await require_permission(
                self._permission_checker, editor, Permission.DELETE, object_id
            )

        tuples = await self._related_tuples(object_id)
        for relation_tuple in tuples:
            await self._store.delete(**relation_tuple.filter_fields())
        logger.info("object_deleted", editor=editor, object_id=object_id, tuples=len(tuples))
        return len(tuples)

    async def _related_tuples(self, object_id: str) -> list[RelationTuple]:
        found = await self._store.query(object=object_id)
        for relation in MIRRORED_RELATIONS:
            found += await self._store.query(set_object=object_id, set_relation=relation)
        # Self-referencing tuples come back from both queries.
        return list(dict.fromkeys(found))
