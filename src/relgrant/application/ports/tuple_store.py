"""Tuple store port - the external relationship-tuple store."""

from typing import Protocol

from relgrant.domain.entities import RelationTuple


class TupleStore(Protocol):
    """Port for check/create/delete/query against a relation-tuple store.

    Omitted fields are wildcards for delete and query and are left out of
    created tuples. A subject set is addressed by set_object and
    set_relation together. Failures raise StoreUnavailable.
    """

    async def check(self, subject: str, relation: str, object: str) -> bool: ...

    async def create(
        self,
        *,
        subject: str | None = None,
        relation: str | None = None,
        object: str | None = None,
        set_object: str | None = None,
        set_relation: str | None = None,
    ) -> None: ...

    async def delete(
        self,
        *,
        subject: str | None = None,
        relation: str | None = None,
        object: str | None = None,
        set_object: str | None = None,
        set_relation: str | None = None,
    ) -> None: ...

    async def query(
        self,
        *,
        subject: str | None = None,
        relation: str | None = None,
        object: str | None = None,
        set_object: str | None = None,
        set_relation: str | None = None,
    ) -> list[RelationTuple]: ...
