"""Permission evaluation over the tuple store."""

from relgrant.infrastructure.permission.permission_checker import TuplePermissionChecker

__all__ = ["TuplePermissionChecker"]
