"""Domain entities describing reusable process templates."""

from dataclasses import dataclass, field
from datetime import datetime

# Largest start_day or duration_days a definition may carry, about one century.
MAX_OFFSET_DAYS = 36500


@dataclass
class TaskDefinition:
    """Blueprint of a task, scheduled relative to its project's start."""

    id: int | None
    template_project_id: int | None
    task_name_template: str
    task_description_template: str | None = None
    start_day: int | None = 0
    duration_days: int | None = 1


@dataclass
class ProjectDefinition:
    """Blueprint of a project, scheduled relative to the master start date."""

    id: int | None
    template_id: int | None
    project_name_template: str
    project_description_template: str | None = None
    start_day: int | None = 0
    duration_days: int | None = 1
    tasks: list[TaskDefinition] = field(default_factory=list)


@dataclass
class Template:
    """Core attributes describing a template definition."""

    id: int | None
    name: str
    description: str | None
    created_by: int | None
    created_at: datetime | None
    updated_at: datetime | None
    projects: list[ProjectDefinition] = field(default_factory=list)


__all__ = ["ProjectDefinition", "TaskDefinition", "Template"]
