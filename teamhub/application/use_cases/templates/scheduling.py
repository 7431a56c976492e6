"""Date arithmetic for instantiating template definitions."""

from __future__ import annotations

from datetime import date, datetime, timedelta

from teamhub.domain.entities import ProjectDefinition, TaskDefinition

DATE_FORMAT = "%Y-%m-%d"


def parse_start_date(value: date | str) -> date:
    """Return ``value`` as a :class:`date`, accepting ``YYYY-MM-DD`` strings."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), DATE_FORMAT).date()
        except ValueError as exc:
            raise ValueError(f"Invalid start date '{value}'. Use YYYY-MM-DD.") from exc
    raise ValueError("Start date must be a date or a YYYY-MM-DD string.")


def _shift(anchor: date, start_day: int | None, duration_days: int | None) -> tuple[date, date]:
    try:
        start = anchor + timedelta(days=start_day or 0)
        return start, start + timedelta(days=duration_days or 1)
    except OverflowError as exc:
        raise ValueError(
            f"Scheduled date is out of range for start date {anchor.isoformat()}"
        ) from exc


def compute_project_dates(
    master_start: date, definition: ProjectDefinition
) -> tuple[date, date]:
    """Return ``(start, end)`` for a project relative to the master start date."""

    return _shift(master_start, definition.start_day, definition.duration_days)


def compute_task_dates(
    project_start: date, definition: TaskDefinition
) -> tuple[date, date]:
    """Return ``(start, due)`` for a task relative to its project's start."""

    return _shift(project_start, definition.start_day, definition.duration_days)


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


__all__ = [
    "DATE_FORMAT",
    "compute_project_dates",
    "compute_task_dates",
    "format_date",
    "parse_start_date",
]
