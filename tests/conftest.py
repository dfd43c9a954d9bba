"""Pytest fixtures for relgrant tests."""

from __future__ import annotations

from dataclasses import dataclass
from unittest.mock import AsyncMock

import pytest

from relgrant.application.authorization_engine import AuthorizationEngine
from relgrant.domain.entities import RelationTuple, SubjectSet
from relgrant.domain.exceptions import StoreUnavailable, ValidationError
from relgrant.domain.value_objects import DEFAULT_ROLE_CATALOG
from relgrant.infrastructure.permission.permission_checker import TuplePermissionChecker

NAMESPACE = "ssm"


# --- Fake tuple store ---


class FakeTupleStore:
    """In-memory tuple store resolving subject sets like Keto does."""

    def __init__(self) -> None:
        self._tuples: dict[RelationTuple, None] = {}
        self.writes = 0
        self.checks = 0

    async def __aenter__(self) -> FakeTupleStore:
        return self

    async def __aexit__(self, *exc_info) -> None:
        pass

    @property
    def tuples(self) -> list[RelationTuple]:
        return list(self._tuples)

    async def check(self, subject: str, relation: str, object: str) -> bool:
        self.checks += 1
        return self._resolve(subject, relation, object, set())

    def _resolve(self, subject: str, relation: str, object: str, seen: set) -> bool:
        if (relation, object) in seen:
            return False
        seen.add((relation, object))
        for t in self._tuples:
            if t.object != object or t.relation != relation:
                continue
            if t.subject_id == subject:
                return True
            if t.subject_set is not None and self._resolve(
                subject, t.subject_set.relation, t.subject_set.object, seen
            ):
                return True
        return False

    async def create(self, **fields) -> None:
        subject, relation, object, set_object, set_relation = self._fields(**fields)
        subject_set = None
        if set_object is not None:
            subject_set = SubjectSet(NAMESPACE, set_object, set_relation)
        self.writes += 1
        self._tuples[
            RelationTuple(
                namespace=NAMESPACE,
                object=object,
                relation=relation,
                subject_id=subject,
                subject_set=subject_set,
            )
        ] = None

    async def delete(self, **fields) -> None:
        self.writes += 1
        for t in self._match(*self._fields(**fields)):
            del self._tuples[t]

    async def query(self, **fields) -> list[RelationTuple]:
        return self._match(*self._fields(**fields))

    @staticmethod
    def _fields(
        subject: str | None = None,
        relation: str | None = None,
        object: str | None = None,
        set_object: str | None = None,
        set_relation: str | None = None,
    ) -> tuple:
        if (set_object is None) != (set_relation is None):
            raise ValidationError("Subject set needs both set_object and set_relation")
        return subject, relation, object, set_object, set_relation

    def _match(self, subject, relation, object, set_object, set_relation) -> list[RelationTuple]:
        matches = []
        for t in self._tuples:
            if subject is not None and t.subject_id != subject:
                continue
            if relation is not None and t.relation != relation:
                continue
            if object is not None and t.object != object:
                continue
            if set_object is not None and (
                t.subject_set is None
                or t.subject_set.object != set_object
                or t.subject_set.relation != set_relation
            ):
                continue
            matches.append(t)
        return matches


class FailingTupleStore(FakeTupleStore):
    """FakeTupleStore whose Nth create or delete raises StoreUnavailable."""

    def __init__(self) -> None:
        super().__init__()
        self.error = StoreUnavailable("write", "connection reset")
        self.attempts = 0
        self._operation: str | None = None
        self._fail_at = 0

    def fail_on(self, operation: str, at: int) -> None:
        """Fail the at-th call of operation, counted from now."""
        self._operation = operation
        self._fail_at = at
        self.attempts = 0

    def _maybe_fail(self, operation: str) -> None:
        if operation != self._operation:
            return
        self.attempts += 1
        if self.attempts == self._fail_at:
            raise self.error

    async def create(self, **fields) -> None:
        self._maybe_fail("create")
        await super().create(**fields)

    async def delete(self, **fields) -> None:
        self._maybe_fail("delete")
        await super().delete(**fields)


@dataclass
class Item:
    """UUID-bearing item for filter tests."""

    uuid: str
    name: str = ""


# --- Fixtures ---


@pytest.fixture
def store() -> FakeTupleStore:
    """Fresh in-memory tuple store for each test."""
    return FakeTupleStore()


@pytest.fixture
def permission_checker(store: FakeTupleStore) -> TuplePermissionChecker:
    return TuplePermissionChecker(store, DEFAULT_ROLE_CATALOG)


@pytest.fixture
def engine(store: FakeTupleStore, permission_checker: TuplePermissionChecker) -> AuthorizationEngine:
    """Engine over the fake store with default catalog and well-known names."""
    return AuthorizationEngine(store=store, permission_checker=permission_checker)


@pytest.fixture
def mock_permission_checker():
    """AsyncMock for PermissionChecker - allows everything by default."""
    mock = AsyncMock()
    mock.check_permission.return_value = True
    mock.check_role.return_value = True
    mock.check_grant_permission.return_value = True
    mock.get_role.return_value = None
    return mock


@pytest.fixture
def failing_store() -> FailingTupleStore:
    """In-memory store that can be told to fail a later write."""
    return FailingTupleStore()


@pytest.fixture
def failing_engine(failing_store: FailingTupleStore) -> AuthorizationEngine:
    return AuthorizationEngine(
        store=failing_store,
        permission_checker=TuplePermissionChecker(failing_store, DEFAULT_ROLE_CATALOG),
    )
