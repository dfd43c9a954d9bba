"""Initialize object use case."""

from relgrant.application.ports import TupleStore
from relgrant.application.use_cases.role.add_role import AddRoleUseCase
from relgrant.domain.value_objects import Role, RoleCatalog
from relgrant.logging import get_logger

logger = get_logger(__name__)


class InitializeObjectUseCase:
    """Set up the role-derived permissions of a new object and its owner."""

    def __init__(self, store: TupleStore, catalog: RoleCatalog, add_role: AddRoleUseCase) -> None:
        self._store = store
        self._catalog = catalog
        self._add_role = add_role

    async def execute(self, object_id: str, owner: str | None = None) -> None:
        """Make each role on object imply its bundled permissions on object."""
        for role in Role:
            for permission in sorted(self._catalog.permissions_of(role)):
                await self._store.create(
                    relation=permission.value,
                    object=object_id,
                    set_object=object_id,
                    set_relation=role.value,
                )

        if owner is not None:
            await self._add_role.execute(None, owner, Role.OWNER, object_id)
        logger.info("object_initialized", object_id=object_id, owner=owner)
