"""Domain entity representing a user role."""

from dataclasses import dataclass


@dataclass
class Role:
    id: int | None
    name: str
    alias: str


__all__ = ["Role"]
