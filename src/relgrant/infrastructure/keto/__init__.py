"""Ory Keto adapter."""

from relgrant.infrastructure.keto.keto_tuple_store import KetoTupleStore

__all__ = ["KetoTupleStore"]
