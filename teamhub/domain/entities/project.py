"""Domain entity representing a project."""

from dataclasses import dataclass
from datetime import date, datetime

PROJECT_STATUS_PLANNING = "planning"
PROJECT_STATUSES = ("planning", "in_progress", "completed", "on_hold")


@dataclass
class Project:
    """A concrete project owned by a team."""

    id: int | None
    uuid: str
    name: str
    description: str | None
    team_id: int | None
    created_by: int | None
    status: str
    start_date: date | None
    end_date: date | None
    created_at: datetime | None = None


__all__ = ["PROJECT_STATUSES", "PROJECT_STATUS_PLANNING", "Project"]
