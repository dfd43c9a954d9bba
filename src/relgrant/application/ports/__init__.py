"""Application ports - interfaces for external adapters."""

from relgrant.application.ports.identifiable import UniquelyIdentifiable
from relgrant.application.ports.permission_checker import PermissionChecker
from relgrant.application.ports.tuple_store import TupleStore

__all__ = [
    "PermissionChecker",
    "TupleStore",
    "UniquelyIdentifiable",
]
