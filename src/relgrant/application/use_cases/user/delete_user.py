"""Delete user use case."""

from relgrant.application.ports import TupleStore
from relgrant.logging import get_logger

logger = get_logger(__name__)


class DeleteUserUseCase:
    """Remove every tuple naming a user as subject."""

    def __init__(self, store: TupleStore) -> None:
        self._store = store

    async def execute(self, user: str) -> int:
        """Delete the user's tuples one by one. Returns how many were deleted."""
        tuples = await self._store.query(subject=user)
        for relation_tuple in tuples:
            await self._store.delete(**relation_tuple.filter_fields())
        logger.info("user_deleted", user=user, tuples=len(tuples))
        return len(tuples)
