"""Domain value objects."""

from relgrant.domain.value_objects.permission import Permission
from relgrant.domain.value_objects.role import Role
from relgrant.domain.value_objects.role_catalog import DEFAULT_ROLE_CATALOG, RoleCatalog
from relgrant.domain.value_objects.well_known import (
    ANONYMOUS_USER,
    DATASETS_ADMINISTRATION,
    MACHINE_LEARNING_MODEL_ADMINISTRATION,
    PUBLIC_COLLECTION,
)

__all__ = [
    "ANONYMOUS_USER",
    "DATASETS_ADMINISTRATION",
    "DEFAULT_ROLE_CATALOG",
    "MACHINE_LEARNING_MODEL_ADMINISTRATION",
    "PUBLIC_COLLECTION",
    "Permission",
    "Role",
    "RoleCatalog",
]
