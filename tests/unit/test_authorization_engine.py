"""Unit tests for collections, object and user lifecycle on the engine."""

import pytest

from relgrant.application.authorization_engine import AuthorizationEngine
from relgrant.application.use_cases.collection.membership import MIRRORED_RELATIONS
from relgrant.domain.exceptions import AuthorizationError, StoreUnavailable
from relgrant.domain.value_objects import DEFAULT_ROLE_CATALOG, Permission, Role


# --- initialize_object ---


@pytest.mark.asyncio
async def test_initialize_object_with_owner(engine) -> None:
    """The owner holds OWNER and, through it, DELETE."""
    await engine.initialize_object("O1", owner="alice")

    assert await engine.check_role("alice", Role.OWNER, "O1")
    assert await engine.check_permission("alice", Permission.DELETE, "O1")


@pytest.mark.asyncio
async def test_initialize_object_writes_scoped_subject_sets(engine, store) -> None:
    """One subject-set tuple per role and bundled permission, scoped to the object."""
    await engine.initialize_object("O1")

    tuples = await store.query(object="O1")
    expected = sum(len(DEFAULT_ROLE_CATALOG.permissions_of(r)) for r in Role)
    assert len(tuples) == expected
    assert all(t.subject_id is None for t in tuples)
    assert all(t.subject_set.object == "O1" for t in tuples)


@pytest.mark.parametrize("role", list(Role))
@pytest.mark.asyncio
async def test_each_role_implies_its_bundle(engine, role: Role) -> None:
    """Holding a role implies exactly its catalog permissions."""
    await engine.initialize_object("O1")
    await engine.add_role(None, "u", role, "O1")

    bundle = DEFAULT_ROLE_CATALOG.permissions_of(role)
    for permission in Permission:
        assert await engine.check_permission("u", permission, "O1") is (permission in bundle)


# --- Collections ---


@pytest.mark.asyncio
async def test_collection_grants_are_inherited(engine) -> None:
    """READ on the collection gives READ on its members."""
    await engine.add_to_collection(None, "fileA", "colX")
    await engine.grant_user_permission(None, "bob", Permission.READ, "colX")

    assert await engine.check_permission("bob", Permission.READ, "fileA")
    assert not await engine.check_permission("bob", Permission.UPDATE, "fileA")


@pytest.mark.asyncio
async def test_collection_roles_are_inherited(engine) -> None:
    """A role on the collection carries over to members."""
    await engine.initialize_object("colX")
    await engine.initialize_object("fileA")
    await engine.add_to_collection(None, "fileA", "colX")
    await engine.add_role(None, "bob", Role.MEMBER, "colX")

    assert await engine.check_role("bob", Role.MEMBER, "fileA")
    assert await engine.check_permission("bob", Permission.UPDATE, "fileA")


@pytest.mark.asyncio
async def test_remove_from_collection_undoes_add(engine, store) -> None:
    """No mirrored tuple from the collection onto the object remains."""
    await engine.grant_user_permission(None, "bob", Permission.READ, "colX")
    before = store.tuples

    await engine.add_to_collection(None, "fileA", "colX")
    await engine.remove_from_collection(None, "fileA", "colX")

    assert not [
        t
        for t in store.tuples
        if t.object == "fileA" and t.subject_set is not None and t.subject_set.object == "colX"
    ]
    assert store.tuples == before
    assert not await engine.check_permission("bob", Permission.READ, "fileA")


@pytest.mark.asyncio
async def test_add_to_collection_requires_associate_and_update(engine, store) -> None:
    """Editor needs ASSOCIATE on the object and UPDATE on the collection."""
    await engine.initialize_object("fileA", owner="alice")
    await engine.initialize_object("colX")
    writes = store.writes

    with pytest.raises(AuthorizationError) as exc_info:
        await engine.add_to_collection("alice", "fileA", "colX")
    assert exc_info.value.permission is Permission.UPDATE
    assert exc_info.value.object_id == "colX"
    assert store.writes == writes

    await engine.add_role(None, "alice", Role.MEMBER, "colX")
    await engine.add_to_collection("alice", "fileA", "colX")
    assert "colX" in await engine.get_collections()


@pytest.mark.asyncio
async def test_add_to_collection_denied_without_associate(engine) -> None:
    """A MEMBER cannot associate the object."""
    await engine.initialize_object("fileA")
    await engine.add_role(None, "bob", Role.MEMBER, "fileA")

    with pytest.raises(AuthorizationError) as exc_info:
        await engine.add_to_collection("bob", "fileA", "colX")
    assert exc_info.value.permission is Permission.ASSOCIATE


@pytest.mark.asyncio
async def test_make_public_and_non_public(engine) -> None:
    """Public objects are readable by every created user."""
    await engine.create_user("x")
    await engine.initialize_object("fileA")

    await engine.make_public(None, "fileA")
    assert await engine.check_permission("x", Permission.READ, "fileA")

    await engine.make_non_public(None, "fileA")
    assert not await engine.check_permission("x", Permission.READ, "fileA")


@pytest.mark.asyncio
async def test_public_collection_name_is_configurable(store, permission_checker) -> None:
    """The engine uses the configured public collection."""
    engine = AuthorizationEngine(store, permission_checker, public_collection="EVERYONE")

    await engine.create_user("x")
    await engine.make_public(None, "fileA")

    assert await engine.check_permission("x", Permission.READ, "fileA")
    assert {t.object for t in await store.query(subject="x")} == {"EVERYONE"}


@pytest.mark.asyncio
async def test_get_collections_and_contents(engine) -> None:
    """Collections are found through their members' inheritance tuples."""
    for obj in ("colX", "colY", "fileA", "fileB"):
        await engine.initialize_object(obj)
    await engine.add_to_collection(None, "fileA", "colX")
    await engine.add_to_collection(None, "fileB", "colX")
    await engine.add_to_collection(None, "fileB", "colY")

    assert await engine.get_collections() == ["colX", "colY"]
    assert sorted(await engine.get_collection_contents("colX")) == ["fileA", "fileB"]
    assert await engine.get_collection_contents("colY") == ["fileB"]
    assert await engine.get_collection_contents("fileA") == []


# --- delete_object ---


@pytest.mark.asyncio
async def test_delete_object_removes_all_access(engine, store) -> None:
    """After deletion no permission check on the object succeeds."""
    await engine.initialize_object("O1", owner="alice")
    await engine.add_role(None, "bob", Role.MEMBER, "O1")
    await engine.grant_unauthenticated_permission(None, Permission.READ, "O1")

    await engine.delete_object("alice", "O1")

    for user in ("alice", "bob", "ANONYMOUS_USER"):
        for permission in Permission:
            assert not await engine.check_permission(user, permission, "O1")
    assert await store.query(object="O1") == []


@pytest.mark.asyncio
async def test_delete_collection_removes_inheritance(engine, store) -> None:
    """Members no longer point at a deleted collection."""
    await engine.initialize_object("colX", owner="alice")
    await engine.initialize_object("fileA", owner="alice")
    await engine.add_to_collection(None, "fileA", "colX")

    await engine.delete_object("alice", "colX")

    assert not [t for t in store.tuples if t.subject_set and t.subject_set.object == "colX"]
    assert await engine.check_permission("alice", Permission.DELETE, "fileA")


@pytest.mark.asyncio
async def test_delete_object_requires_delete(engine, store) -> None:
    """A MAINTAINER cannot delete."""
    await engine.initialize_object("O1", owner="alice")
    await engine.add_role(None, "bob", Role.MAINTAINER, "O1")
    before = store.tuples

    with pytest.raises(AuthorizationError) as exc_info:
        await engine.delete_object("bob", "O1")
    assert exc_info.value.permission is Permission.DELETE
    assert store.tuples == before


@pytest.mark.asyncio
async def test_object_queries(engine) -> None:
    """Object permissions and existence reflect the stored tuples."""
    assert not await engine.object_exists("O1")

    await engine.grant_user_permission(None, "alice", Permission.READ, "O1")

    assert await engine.object_exists("O1")
    assert await engine.object_exists("alice")
    assert [t.relation for t in await engine.get_object_permissions("O1")] == ["READ"]


# --- Store failures ---


@pytest.mark.asyncio
async def test_add_to_collection_store_failure_leaves_partial_mirror(
    failing_engine, failing_store
) -> None:
    """The store error reaches the caller untouched; earlier writes stay."""
    failing_store.fail_on("create", at=5)

    with pytest.raises(StoreUnavailable) as exc_info:
        await failing_engine.add_to_collection(None, "fileA", "colX")

    assert exc_info.value is failing_store.error
    assert failing_store.attempts == 5
    mirrored = [
        t.relation
        for t in failing_store.tuples
        if t.subject_set is not None and t.subject_set.object == "colX"
    ]
    assert mirrored == list(MIRRORED_RELATIONS[:4])


@pytest.mark.asyncio
async def test_delete_object_store_failure_is_not_retried(failing_engine, failing_store) -> None:
    """A failed delete stops the cascade; tuples not yet deleted remain."""
    await failing_engine.initialize_object("O1", owner="alice")
    before = len(failing_store.tuples)
    failing_store.fail_on("delete", at=3)

    with pytest.raises(StoreUnavailable) as exc_info:
        await failing_engine.delete_object("alice", "O1")

    assert exc_info.value is failing_store.error
    assert failing_store.attempts == 3
    assert len(failing_store.tuples) == before - 2


# --- Users ---


@pytest.mark.asyncio
async def test_create_user_grants_only_public_read_update(engine, store) -> None:
    """createUser writes READ and UPDATE on the public collection, nothing else."""
    await engine.create_user("x")

    tuples = await store.query(subject="x")
    assert {(t.relation, t.object) for t in tuples} == {
        ("READ", "PUBLIC_COLLECTION"),
        ("UPDATE", "PUBLIC_COLLECTION"),
    }


@pytest.mark.asyncio
async def test_delete_user_removes_every_tuple(engine, store) -> None:
    """deleteUser leaves no tuple naming the user as subject."""
    await engine.create_user("x")
    await engine.initialize_object("O1", owner="x")
    await engine.grant_dataset_creation_permission(None, "x")
    await engine.create_user("y")

    await engine.delete_user("x")

    assert await store.query(subject="x") == []
    assert len(await store.query(subject="y")) == 2
    assert not await engine.check_permission("x", Permission.READ, "O1")


# --- Global creation capabilities ---


@pytest.mark.asyncio
async def test_dataset_creation_permission(engine) -> None:
    """Grant and revoke CREATE on the dataset administration object."""
    assert not await engine.check_dataset_creation_permission("alice")

    await engine.grant_dataset_creation_permission(None, "alice")
    assert await engine.check_dataset_creation_permission("alice")
    assert not await engine.check_machine_learning_model_creation_permission("alice")

    await engine.revoke_dataset_creation_permission(None, "alice")
    assert not await engine.check_dataset_creation_permission("alice")


@pytest.mark.asyncio
async def test_model_creation_permission(engine) -> None:
    """Grant and revoke CREATE on the model administration object."""
    await engine.grant_machine_learning_model_creation_permission(None, "bob")
    assert await engine.check_machine_learning_model_creation_permission("bob")
    assert not await engine.check_dataset_creation_permission("bob")

    await engine.revoke_machine_learning_model_creation_permission(None, "bob")
    assert not await engine.check_machine_learning_model_creation_permission("bob")


@pytest.mark.asyncio
async def test_creation_permission_editor_needs_grant_create(engine) -> None:
    """An editor must hold GRANT_CREATE on the administration object."""
    with pytest.raises(AuthorizationError) as exc_info:
        await engine.grant_dataset_creation_permission("eve", "bob")
    assert exc_info.value.permission is Permission.GRANT_CREATE
    assert exc_info.value.user == "eve"
    assert exc_info.value.object_id == "DATASETS_ADMINISTRATION"

    await engine.grant_user_permission(
        None, "admin", Permission.GRANT_CREATE, "DATASETS_ADMINISTRATION"
    )
    await engine.grant_dataset_creation_permission("admin", "bob")
    assert await engine.check_dataset_creation_permission("bob")
