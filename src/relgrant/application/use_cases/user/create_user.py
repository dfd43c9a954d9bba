"""Create user use case."""

from relgrant.application.ports import TupleStore
from relgrant.domain.value_objects import PUBLIC_COLLECTION, Permission
from relgrant.logging import get_logger

logger = get_logger(__name__)


class CreateUserUseCase:
    """Register a user: READ and UPDATE on the public collection, nothing else."""

    def __init__(self, store: TupleStore, public_collection: str = PUBLIC_COLLECTION) -> None:
        self._store = store
        self._public_collection = public_collection

    async def execute(self, user: str) -> None:
        for permission in (Permission.READ, Permission.UPDATE):
            await self._store.create(
                subject=user, relation=permission.value, object=self._public_collection
            )
        logger.info("user_created", user=user)
