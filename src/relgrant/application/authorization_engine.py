"""Authorization engine - the operation surface consumed by the REST layer."""

from collections.abc import Sequence
from typing import TypeVar

from relgrant.application.ports import PermissionChecker, TupleStore, UniquelyIdentifiable
from relgrant.application.use_cases.administration.creation_permission import (
    dataset_creation,
    machine_learning_model_creation,
)
from relgrant.application.use_cases.collection.list_collections import ListCollectionsUseCase
from relgrant.application.use_cases.collection.membership import (
    AddToCollectionUseCase,
    RemoveFromCollectionUseCase,
)
from relgrant.application.use_cases.object.delete_object import DeleteObjectUseCase
from relgrant.application.use_cases.object.initialize_object import InitializeObjectUseCase
from relgrant.application.use_cases.object.object_queries import ObjectQueriesUseCase
from relgrant.application.use_cases.permission.grant_permission import GrantPermissionUseCase
from relgrant.application.use_cases.permission.revoke_permission import RevokePermissionUseCase
from relgrant.application.use_cases.role.add_role import AddRoleUseCase
from relgrant.application.use_cases.role.remove_role import RemoveRoleUseCase
from relgrant.application.use_cases.user.create_user import CreateUserUseCase
from relgrant.application.use_cases.user.delete_user import DeleteUserUseCase
from relgrant.domain.entities import RelationTuple
from relgrant.domain.value_objects import (
    ANONYMOUS_USER,
    DEFAULT_ROLE_CATALOG,
    PUBLIC_COLLECTION,
    Permission,
    Role,
    RoleCatalog,
)

T = TypeVar("T", bound=UniquelyIdentifiable)


class AuthorizationEngine:
    """Translates access-control intent into tuple store mutations.

    Holds no state of its own. Every mutating operation takes an editor:
    the already-authenticated acting user, or None to skip authorization
    for system and bootstrap calls. Denials raise AuthorizationError before
    anything is written; store failures propagate as StoreUnavailable.
    """

    def __init__(
        self,
        store: TupleStore,
        permission_checker: PermissionChecker,
        catalog: RoleCatalog = DEFAULT_ROLE_CATALOG,
        public_collection: str = PUBLIC_COLLECTION,
        anonymous_user: str = ANONYMOUS_USER,
    ) -> None:
        self._checker = permission_checker
        self._public_collection = public_collection

        self._add_role = AddRoleUseCase(store, permission_checker, catalog)
        self._remove_role = RemoveRoleUseCase(store, permission_checker, catalog)
        self._grant = GrantPermissionUseCase(store, permission_checker, anonymous_user)
        self._revoke = RevokePermissionUseCase(store, permission_checker, anonymous_user)
        self._add_to_collection = AddToCollectionUseCase(store, permission_checker)
        self._remove_from_collection = RemoveFromCollectionUseCase(store, permission_checker)
        self._collections = ListCollectionsUseCase(store)
        self._initialize_object = InitializeObjectUseCase(store, catalog, self._add_role)
        self._delete_object = DeleteObjectUseCase(store, permission_checker)
        self._objects = ObjectQueriesUseCase(store)
        self._create_user = CreateUserUseCase(store, public_collection)
        self._delete_user = DeleteUserUseCase(store)
        self._dataset_creation = dataset_creation(store, permission_checker)
        self._model_creation = machine_learning_model_creation(store, permission_checker)

    # --- Checks ---

    async def check_permission(self, user: str, permission: Permission, object_id: str) -> bool:
        return await self._checker.check_permission(user, permission, object_id)

    async def check_role(self, user: str, role: Role, object_id: str) -> bool:
        return await self._checker.check_role(user, role, object_id)

    async def get_role(self, user: str, object_id: str) -> Role | None:
        return await self._checker.get_role(user, object_id)

    async def filter(self, user: str, permission: Permission, candidates: Sequence[T]) -> list[T]:
        return await self._checker.filter(user, permission, candidates)

    # --- Roles ---

    async def add_role(self, editor: str | None, user: str, role: Role, object_id: str) -> None:
        await self._add_role.execute(editor, user, role, object_id)

    async def remove_role(
        self, editor: str | None, user: str, role: Role, object_id: str
    ) -> None:
        await self._remove_role.execute(editor, user, role, object_id)

    # --- Direct grants ---

    async def grant_user_permission(
        self, editor: str | None, user: str, permission: Permission, object_id: str
    ) -> None:
        await self._grant.to_user(editor, user, permission, object_id)

    async def grant_role_permission(
        self, editor: str | None, role: Role, permission: Permission, object_id: str
    ) -> None:
        await self._grant.to_role(editor, role, permission, object_id)

    async def grant_unauthenticated_permission(
        self, editor: str | None, permission: Permission, object_id: str
    ) -> None:
        await self._grant.to_anonymous(editor, permission, object_id)

    async def revoke_user_permission(
        self, editor: str | None, user: str, permission: Permission, object_id: str
    ) -> None:
        await self._revoke.from_user(editor, user, permission, object_id)

    async def revoke_role_permission(
        self, editor: str | None, role: Role, permission: Permission, object_id: str
    ) -> None:
        await self._revoke.from_role(editor, role, permission, object_id)

    async def revoke_unauthenticated_permission(
        self, editor: str | None, permission: Permission, object_id: str
    ) -> None:
        await self._revoke.from_anonymous(editor, permission, object_id)

    # --- Collections ---

    async def add_to_collection(
        self, editor: str | None, object_id: str, collection_id: str
    ) -> None:
        await self._add_to_collection.execute(editor, object_id, collection_id)

    async def remove_from_collection(
        self, editor: str | None, object_id: str, collection_id: str
    ) -> None:
        await self._remove_from_collection.execute(editor, object_id, collection_id)

    async def make_public(self, editor: str | None, object_id: str) -> None:
        await self._add_to_collection.execute(editor, object_id, self._public_collection)

    async def make_non_public(self, editor: str | None, object_id: str) -> None:
        await self._remove_from_collection.execute(editor, object_id, self._public_collection)

    async def get_collections(self) -> list[str]:
        return await self._collections.execute()

    async def get_collection_contents(self, collection_id: str) -> list[str]:
        return await self._collections.contents(collection_id)

    # --- Object lifecycle ---

    async def initialize_object(self, object_id: str, owner: str | None = None) -> None:
        await self._initialize_object.execute(object_id, owner)

    async def delete_object(self, editor: str | None, object_id: str) -> None:
        await self._delete_object.execute(editor, object_id)

    async def get_object_permissions(self, object_id: str) -> list[RelationTuple]:
        return await self._objects.permissions(object_id)

    async def object_exists(self, uuid: str) -> bool:
        return await self._objects.exists(uuid)

    # --- User lifecycle ---

    async def create_user(self, user: str) -> None:
        await self._create_user.execute(user)

    async def delete_user(self, user: str) -> None:
        await self._delete_user.execute(user)

    # --- Global creation capabilities ---

    async def check_dataset_creation_permission(self, user: str) -> bool:
        return await self._dataset_creation.check(user)

    async def grant_dataset_creation_permission(
        self, editor: str | None, user: str
    ) -> None:
        await self._dataset_creation.grant(editor, user)

    async def revoke_dataset_creation_permission(
        self, editor: str | None, user: str
    ) -> None:
        await self._dataset_creation.revoke(editor, user)

    async def check_machine_learning_model_creation_permission(self, user: str) -> bool:
        return await self._model_creation.check(user)

    async def grant_machine_learning_model_creation_permission(
        self, editor: str | None, user: str
    ) -> None:
        await self._model_creation.grant(editor, user)

    async def revoke_machine_learning_model_creation_permission(
        self, editor: str | None, user: str
    ) -> None:
        await self._model_creation.revoke(editor, user)
