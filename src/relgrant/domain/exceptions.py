"""Domain exceptions."""

from enum import StrEnum


class RelGrantError(Exception):
    """Base exception for relgrant."""

    pass


class AuthorizationError(RelGrantError):
    """User is not allowed to perform the requested change.

    Carries the acting user, the permission or role that was missing or
    violated, and the object, so the boundary can audit-log the denial.
    """

    def __init__(
        self,
        message: str,
        *,
        user: str | None,
        permission: StrEnum | None,
        object_id: str,
    ) -> None:
        super().__init__(message)
        self.user = user
        self.permission = permission
        self.object_id = object_id


class StoreUnavailable(RelGrantError):
    """Tuple store could not be reached or answered with an error."""

    def __init__(
        self,
        operation: str,
        detail: str = "",
        status_code: int | None = None,
    ) -> None:
        message = f"Tuple store {operation} failed"
        if status_code is not None:
            message += f" with HTTP {status_code}"
        if detail:
            message += f": {detail}"
        super().__init__(message)
        self.operation = operation
        self.status_code = status_code


class ValidationError(RelGrantError):
    """Validation failed for input data."""

    pass
