"""Permissions that can be held on an object."""

from enum import StrEnum


class Permission(StrEnum):
    """Relations granting a single capability on an object.

    Each GRANT_X gates granting and revoking X (and GRANT_X itself).
    """

    ASSOCIATE = "ASSOCIATE"
    CREATE = "CREATE"
    DELETE = "DELETE"
    READ = "READ"
    UPDATE = "UPDATE"
    GRANT_ASSOCIATE = "GRANT_ASSOCIATE"
    GRANT_CREATE = "GRANT_CREATE"
    GRANT_DELETE = "GRANT_DELETE"
    GRANT_READ = "GRANT_READ"
    GRANT_UPDATE = "GRANT_UPDATE"

    @property
    def is_grant(self) -> bool:
        return self.value.startswith("GRANT_")

    @property
    def grant_permission(self) -> "Permission":
        """The GRANT_* permission needed to hand this permission out."""
        if self.is_grant:
            return self
        return Permission(f"GRANT_{self.value}")
