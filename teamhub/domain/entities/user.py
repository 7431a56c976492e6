"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime

from .role import Role


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    role: Role
    name: str
    email: str
    is_active: bool
    created_at: datetime | None = None

    def has_role(self, alias: str) -> bool:
        """Return ``True`` when the user's role alias matches ``alias``."""

        return self.role.alias.lower() == alias.lower()

    def has_any_role(self, *aliases: str) -> bool:
        return any(self.has_role(alias) for alias in aliases)

    def is_admin(self) -> bool:
        """Return ``True`` when the user is an administrator."""

        return self.has_role("admin")


__all__ = ["User"]
