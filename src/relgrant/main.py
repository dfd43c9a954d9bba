"""Application entry point and composition root."""

import argparse
import asyncio
import sys

from relgrant import __version__
from relgrant.application.authorization_engine import AuthorizationEngine
from relgrant.config import Settings, get_settings
from relgrant.domain.exceptions import RelGrantError
from relgrant.domain.value_objects import DEFAULT_ROLE_CATALOG, Permission, Role
from relgrant.infrastructure.keto import KetoTupleStore
from relgrant.infrastructure.permission.permission_checker import TuplePermissionChecker
from relgrant.logging import setup_logging


def create_tuple_store(settings: Settings) -> KetoTupleStore:
    """Keto store from settings. Caller closes it."""
    return KetoTupleStore(
        read_url=settings.keto_read_url,
        write_url=settings.keto_write_url,
        namespace=settings.keto_namespace,
        timeout=settings.keto_timeout,
        page_size=settings.keto_page_size,
    )


def create_authorization_engine(
    store: KetoTupleStore, settings: Settings | None = None
) -> AuthorizationEngine:
    """Composition root - wire the engine on top of a tuple store."""
    settings = settings or get_settings()
    permission_checker = TuplePermissionChecker(store, DEFAULT_ROLE_CATALOG)
    return AuthorizationEngine(
        store=store,
        permission_checker=permission_checker,
        catalog=DEFAULT_ROLE_CATALOG,
        public_collection=settings.public_collection,
        anonymous_user=settings.anonymous_user,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="relgrant", description="relgrant administration")
    parser.add_argument("--version", action="version", version=f"relgrant {__version__}")
    commands = parser.add_subparsers(dest="command")

    create_user = commands.add_parser("create-user", help="Register a user")
    create_user.add_argument("user")

    init_object = commands.add_parser("init-object", help="Initialize an object's permissions")
    init_object.add_argument("object_id")
    init_object.add_argument("--owner", default=None)

    check = commands.add_parser("check", help="Check a permission")
    check.add_argument("user")
    check.add_argument("permission", type=Permission, choices=list(Permission))
    check.add_argument("object_id")

    role = commands.add_parser("role", help="Show a user's role on an object")
    role.add_argument("user")
    role.add_argument("object_id")

    grant_role = commands.add_parser("grant-role", help="Assign a role without authorization")
    grant_role.add_argument("user")
    grant_role.add_argument("role", type=Role, choices=list(Role))
    grant_role.add_argument("object_id")
    return parser


async def _run(args: argparse.Namespace, settings: Settings) -> int:
    async with create_tuple_store(settings) as store:
        engine = create_authorization_engine(store, settings)
        if args.command == "create-user":
            await engine.create_user(args.user)
        elif args.command == "init-object":
            await engine.initialize_object(args.object_id, args.owner)
        elif args.command == "check":
            allowed = await engine.check_permission(args.user, args.permission, args.object_id)
            print("allowed" if allowed else "denied")
            return 0 if allowed else 1
        elif args.command == "role":
            role = await engine.get_role(args.user, args.object_id)
            print(role or "none")
        elif args.command == "grant-role":
            await engine.add_role(None, args.user, args.role, args.object_id)
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = _build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings)

    if args.command is None:
        print(f"relgrant v{__version__}")
        print(f"keto read: {settings.keto_read_url} write: {settings.keto_write_url}")
        return 0

    try:
        return asyncio.run(_run(args, settings))
    except RelGrantError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
