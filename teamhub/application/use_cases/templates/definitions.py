"""Input data for building nested template definitions."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from teamhub.domain.entities import MAX_OFFSET_DAYS, ProjectDefinition, TaskDefinition


@dataclass(frozen=True)
class NewTaskDefinitionData:
    """Data required to add a task definition to a project definition."""

    task_name_template: str
    task_description_template: str | None = None
    start_day: int | None = 0
    duration_days: int | None = 1


@dataclass(frozen=True)
class NewProjectDefinitionData:
    """Data required to add a project definition to a template."""

    project_name_template: str
    project_description_template: str | None = None
    start_day: int | None = 0
    duration_days: int | None = 1
    tasks: Sequence[NewTaskDefinitionData] = field(default_factory=tuple)


def _ensure_offsets(start_day: int | None, duration_days: int | None, *, label: str) -> None:
    for name, value in (("start_day", start_day), ("duration_days", duration_days)):
        if value is None:
            continue
        if value < 0:
            raise ValueError(f"{label} {name} cannot be negative")
        if value > MAX_OFFSET_DAYS:
            raise ValueError(f"{label} {name} cannot exceed {MAX_OFFSET_DAYS} days")


def _ensure_name(value: str, *, label: str) -> str:
    normalized = (value or "").strip()
    if not normalized:
        raise ValueError(f"{label} name template cannot be empty")
    return normalized


def build_project_definitions(
    payloads: Sequence[NewProjectDefinitionData],
) -> list[ProjectDefinition]:
    """Validate ``payloads`` and convert them into unsaved domain definitions."""

    definitions: list[ProjectDefinition] = []
    for payload in payloads:
        _ensure_offsets(payload.start_day, payload.duration_days, label="Project")
        tasks: list[TaskDefinition] = []
        for task in payload.tasks:
            _ensure_offsets(task.start_day, task.duration_days, label="Task")
            tasks.append(
                TaskDefinition(
                    id=None,
                    template_project_id=None,
                    task_name_template=_ensure_name(task.task_name_template, label="Task"),
                    task_description_template=task.task_description_template,
                    start_day=task.start_day,
                    duration_days=task.duration_days,
                )
            )
        definitions.append(
            ProjectDefinition(
                id=None,
                template_id=None,
                project_name_template=_ensure_name(
                    payload.project_name_template, label="Project"
                ),
                project_description_template=payload.project_description_template,
                start_day=payload.start_day,
                duration_days=payload.duration_days,
                tasks=tasks,
            )
        )
    return definitions


__all__ = [
    "NewProjectDefinitionData",
    "NewTaskDefinitionData",
    "build_project_definitions",
]
