"""Domain entities representing teams and their membership."""

from dataclasses import dataclass
from datetime import datetime

TEAM_ROLE_MEMBER = "member"


@dataclass
class Team:
    id: int | None
    uuid: str
    name: str
    description: str | None = None
    created_by: int | None = None
    created_at: datetime | None = None


@dataclass
class TeamMember:
    team_id: int
    user_id: int
    role: str = TEAM_ROLE_MEMBER
    joined_at: datetime | None = None


__all__ = ["TEAM_ROLE_MEMBER", "Team", "TeamMember"]
