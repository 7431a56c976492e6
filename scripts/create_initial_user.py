"""Utility script to create an initial user and print an access token."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from teamhub.application.use_cases.users import create_user
from teamhub.infrastructure.database import initialize_database, session_scope
from teamhub.infrastructure.security import create_access_token


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create an initial user for the TeamHub API.",
    )
    parser.add_argument(
        "--name",
        default="Administrator",
        help="Full name of the user (default: Administrator)",
    )
    parser.add_argument(
        "--email",
        default="admin@example.com",
        help="Email address of the user (default: admin@example.com)",
    )
    parser.add_argument(
        "--role",
        default="admin",
        choices=["admin", "manager", "member"],
        help="Role assigned to the user (default: admin)",
    )
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()

    initialize_database()

    try:
        with session_scope() as session:
            user = create_user(
                session,
                name=args.name,
                email=args.email,
                role_alias=args.role,
            )
    except ValueError as exc:
        raise SystemExit(f"Could not create the user: {exc}") from exc
    except SQLAlchemyError as exc:
        raise SystemExit(f"Database error while saving the user: {exc}") from exc

    token = create_access_token({"sub": str(user.id)})
    print(
        "User created:\n"
        f"  ID: {user.id}\n"
        f"  Name: {user.name}\n"
        f"  Email: {user.email}\n"
        f"  Role: {user.role.alias}\n"
        f"  Token: {token}"
    )


if __name__ == "__main__":
    main()
