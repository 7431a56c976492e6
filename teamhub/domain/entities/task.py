"""Domain entity representing a task."""

from dataclasses import dataclass
from datetime import date, datetime

TASK_STATUS_TODO = "todo"
TASK_PRIORITY_MEDIUM = "medium"
TASK_STATUSES = ("todo", "in_progress", "review", "done")
TASK_PRIORITIES = ("low", "medium", "high", "urgent")


@dataclass
class Task:
    """A unit of work inside a project."""

    id: int | None
    uuid: str
    title: str
    description: str | None
    project_id: int
    reporter_id: int | None
    status: str
    due_date: date | None
    assignee_id: int | None = None
    priority: str = TASK_PRIORITY_MEDIUM
    created_at: datetime | None = None


__all__ = [
    "TASK_PRIORITIES",
    "TASK_PRIORITY_MEDIUM",
    "TASK_STATUSES",
    "TASK_STATUS_TODO",
    "Task",
]
