"""Bulk creation of tasks from CSV files."""

from __future__ import annotations

from uuid import uuid4

from sqlalchemy.orm import Session

from teamhub.domain.entities import (
    TASK_PRIORITIES,
    TASK_PRIORITY_MEDIUM,
    TASK_STATUS_TODO,
    TASK_STATUSES,
    ImportResult,
    Task,
)
from teamhub.domain.errors import RowImportError
from teamhub.infrastructure.repositories import ProjectRepository, TaskRepository, UserRepository

from .batch import CsvRow, parse_optional_date, read_csv_rows, run_row_import

TASK_CSV_COLUMNS = (
    "title",
    "description",
    "project_uuid",
    "assignee_email",
    "due_date",
    "priority",
    "status",
)


def _validate(row: CsvRow) -> str | None:
    if not row.get("title") or not row.get("project_uuid"):
        return "Missing required fields: title and project_uuid."
    return None


def import_tasks_from_csv(
    session: Session, *, content: bytes, reporter_id: int
) -> ImportResult:
    """Create one task per CSV row, reported by ``reporter_id``."""

    rows = read_csv_rows(content)
    project_repository = ProjectRepository(session)
    task_repository = TaskRepository(session)
    user_repository = UserRepository(session)

    def handle(_: Session, row: CsvRow) -> None:
        project_uuid = row["project_uuid"]
        project_id = project_repository.get_id_by_uuid(project_uuid)
        if project_id is None:
            raise RowImportError(f"Project with UUID '{project_uuid}' not found.")

        assignee_id = None
        assignee_email = row.get("assignee_email")
        if assignee_email:
            assignee = user_repository.get_by_email(assignee_email)
            if assignee is None:
                raise RowImportError(f"Assignee with email '{assignee_email}' not found.")
            assignee_id = assignee.id

        priority = row.get("priority") or TASK_PRIORITY_MEDIUM
        if priority not in TASK_PRIORITIES:
            raise RowImportError(f"Invalid priority '{priority}'.")
        status = row.get("status") or TASK_STATUS_TODO
        if status not in TASK_STATUSES:
            raise RowImportError(f"Invalid status '{status}'.")

        task_repository.add(
            Task(
                id=None,
                uuid=str(uuid4()),
                title=row["title"],
                description=row.get("description") or None,
                project_id=project_id,
                reporter_id=reporter_id,
                status=status,
                due_date=parse_optional_date(row.get("due_date"), field="due_date"),
                assignee_id=assignee_id,
                priority=priority,
            )
        )

    return run_row_import(session, rows, handle, validate=_validate)


__all__ = ["TASK_CSV_COLUMNS", "import_tasks_from_csv"]
