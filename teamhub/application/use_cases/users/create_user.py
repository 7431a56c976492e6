"""Use case for registering users."""

from sqlalchemy.orm import Session

from teamhub.domain.entities import Role, User
from teamhub.infrastructure.repositories import UserRepository

ROLE_NAMES = {"admin": "Administrator", "manager": "Manager", "member": "Member"}


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    role_alias: str = "member",
    is_active: bool = True,
) -> User:
    """Create a user with the given role, creating the role when missing."""

    repository = UserRepository(session)

    normalized_email = email.strip().lower()
    if not normalized_email:
        raise ValueError("Email cannot be empty")
    if repository.get_by_email(normalized_email) is not None:
        raise ValueError("Email is already registered")

    alias = role_alias.strip().lower()
    if alias not in ROLE_NAMES:
        raise ValueError(f"Unknown role '{role_alias}'")

    user = repository.create(
        User(
            id=None,
            role=Role(id=None, name=ROLE_NAMES[alias], alias=alias),
            name=name.strip(),
            email=normalized_email,
            is_active=is_active,
        )
    )
    session.commit()
    return user
