"""Roles bundling permissions."""

from enum import StrEnum


class Role(StrEnum):
    """Named permission bundles; ranks live in the role catalog."""

    COLLABORATOR = "COLLABORATOR"
    MEMBER = "MEMBER"
    MAINTAINER = "MAINTAINER"
    OWNER = "OWNER"
