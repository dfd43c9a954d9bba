"""Collection queries."""

from relgrant.application.ports import TupleStore
from relgrant.domain.value_objects import Permission, Role


class ListCollectionsUseCase:
    """Find collections by the inheritance tuples their members carry."""

    def __init__(self, store: TupleStore) -> None:
        self._store = store

    async def execute(self) -> list[str]:
        """Every object some other object inherits READ from, sorted."""
        tuples = await self._store.query(relation=Permission.READ.value)
        collections = {
            t.subject_set.object
            for t in tuples
            if t.subject_set is not None
            and t.subject_set.relation == Permission.READ.value
            and t.subject_set.object != t.object
        }
        return sorted(collections)

    async def contents(self, collection_id: str) -> list[str]:
        """Objects whose ownership follows ownership of the collection."""
        tuples = await self._store.query(
            relation=Role.OWNER.value,
            set_object=collection_id,
            set_relation=Role.OWNER.value,
        )
        return [t.object for t in tuples if t.object is not None and t.object != collection_id]
