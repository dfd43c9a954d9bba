"""Role catalog - permission bundle and rank for every role."""

from collections.abc import Mapping
from types import MappingProxyType

from relgrant.domain.exceptions import ValidationError
from relgrant.domain.value_objects.permission import Permission
from relgrant.domain.value_objects.role import Role


class RoleCatalog:
    """Immutable role -> permissions table with a strict rank order."""

    def __init__(
        self,
        permissions: Mapping[Role, frozenset[Permission]],
        ranks: Mapping[Role, int],
    ) -> None:
        for role in Role:
            if not permissions.get(role):
                raise ValidationError(f"Role {role} has no permissions in the catalog")
            if role not in ranks:
                raise ValidationError(f"Role {role} has no rank in the catalog")
        if len(set(ranks.values())) != len(ranks):
            raise ValidationError("Role ranks must be distinct")

        self._permissions = MappingProxyType(
            {role: frozenset(permissions[role]) for role in Role}
        )
        self._ranks = MappingProxyType({role: ranks[role] for role in Role})

    def permissions_of(self, role: Role) -> frozenset[Permission]:
        return self._permissions[role]

    def rank(self, role: Role) -> int:
        return self._ranks[role]

    def roles_by_rank(self, descending: bool = True) -> list[Role]:
        return sorted(Role, key=self.rank, reverse=descending)

    def is_superior(self, role: Role | None, other: Role | None) -> bool:
        """True if role ranks strictly above other. None means no role."""
        if role is None:
            return False
        if other is None:
            return True
        return self.rank(role) > self.rank(other)


_COLLABORATOR = frozenset({Permission.READ})
_MEMBER = _COLLABORATOR | {Permission.UPDATE}
_MAINTAINER = _MEMBER | {
    Permission.ASSOCIATE,
    Permission.CREATE,
    Permission.GRANT_ASSOCIATE,
    Permission.GRANT_CREATE,
    Permission.GRANT_READ,
    Permission.GRANT_UPDATE,
}
_OWNER = _MAINTAINER | {Permission.DELETE, Permission.GRANT_DELETE}

DEFAULT_ROLE_CATALOG = RoleCatalog(
    permissions={
        Role.COLLABORATOR: _COLLABORATOR,
        Role.MEMBER: _MEMBER,
        Role.MAINTAINER: _MAINTAINER,
        Role.OWNER: _OWNER,
    },
    ranks={
        Role.COLLABORATOR: 0,
        Role.MEMBER: 1,
        Role.MAINTAINER: 2,
        Role.OWNER: 3,
    },
)
