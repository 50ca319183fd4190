"""Command-line helper for managing users and role claims.

This module serves as a CLI wrapper around the authprovider facade.
"""
from __future__ import annotations
import argparse
import logging
import os
import sys

from google.auth.exceptions import DefaultCredentialsError

from authprovider.config import load_settings
from authprovider.core.exceptions import AuthProviderError
from authprovider.core.factory import create_auth_provider


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Firebase role claim helper")
    parser.add_argument("--provider", default=None, help="Auth provider name (default: AUTH_PROVIDER or firebase)")
    parser.add_argument("--log-level", default=os.environ.get("LOG_LEVEL", "WARNING"))

    sub = parser.add_subparsers(dest="cmd")

    sc = sub.add_parser("create-user")
    sc.add_argument("--email", required=True)
    sc.add_argument("--display-name", required=True)

    for name in ("set-roles", "add-roles", "unset-roles"):
        sr = sub.add_parser(name)
        sr.add_argument("--uid", required=True)
        sr.add_argument("--role", dest="roles", action="append", default=[], required=name != "set-roles",
                        help="Role name (repeatable)")

    sg = sub.add_parser("get-roles")
    sg.add_argument("--uid", required=True)

    sv = sub.add_parser("verify-token")
    sv.add_argument("--token", required=True)
    return parser


def _format_roles(roles: list[str], present: bool) -> str:
    return ",".join(roles) if present else "<none>"


def main(argv: list[str] | None = None) -> None:
    """Command-line entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.cmd:
        parser.print_help()
        return

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        provider = create_auth_provider(args.provider, load_settings())
    except (RuntimeError, ValueError, DefaultCredentialsError) as e:
        parser.error(str(e))

    try:
        if args.cmd == "create-user":
            print(provider.create_user(args.email, args.display_name))
        elif args.cmd == "verify-token":
            token = provider.verify_token(args.token)
            uid = token.get_uid()
            print(f"uid={uid} roles={_format_roles(*token.get_roles())}")
        else:
            operations = {
                "set-roles": provider.set_roles,
                "add-roles": provider.add_roles,
                "unset-roles": provider.unset_roles,
            }
            if args.cmd in operations:
                operations[args.cmd](args.uid, args.roles)
            print(f"uid={args.uid} roles={_format_roles(*provider.get_roles(args.uid))}")
    except AuthProviderError as e:
        print(f"[{args.cmd}] Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
