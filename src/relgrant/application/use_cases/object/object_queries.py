"""Object queries."""

from relgrant.application.ports import TupleStore
from relgrant.application.use_cases.collection.membership import MIRRORED_RELATIONS
from relgrant.domain.entities import RelationTuple


class ObjectQueriesUseCase:
    """Read-only lookups of the tuples around an object."""

    def __init__(self, store: TupleStore) -> None:
        self._store = store

    async def permissions(self, object_id: str) -> list[RelationTuple]:
        """Every tuple granting something on object."""
        return await self._store.query(object=object_id)

    async def exists(self, uuid: str) -> bool:
        """True if any tuple names uuid as object, subject or subject-set object."""
        if await self._store.query(object=uuid):
            return True
        if await self._store.query(subject=uuid):
            return True
        for relation in MIRRORED_RELATIONS:
            if await self._store.query(set_object=uuid, set_relation=relation):
                return True
        return False
