"""Bulk creation of projects from CSV files."""

from __future__ import annotations

from uuid import uuid4

from sqlalchemy.orm import Session

from teamhub.domain.entities import (
    PROJECT_STATUS_PLANNING,
    PROJECT_STATUSES,
    ImportResult,
    Project,
)
from teamhub.domain.errors import RowImportError
from teamhub.infrastructure.repositories import ProjectRepository, TeamRepository

from .batch import CsvRow, parse_optional_date, read_csv_rows, run_row_import

PROJECT_CSV_COLUMNS = ("name", "description", "team_uuid", "status", "start_date", "end_date")


def _validate(row: CsvRow) -> str | None:
    if not row.get("name"):
        return "Missing required field: name."
    return None


def import_projects_from_csv(
    session: Session, *, content: bytes, creator_id: int
) -> ImportResult:
    """Create one project per CSV row on behalf of ``creator_id``."""

    rows = read_csv_rows(content)
    team_repository = TeamRepository(session)
    project_repository = ProjectRepository(session)

    def handle(_: Session, row: CsvRow) -> None:
        team_id = None
        team_uuid = row.get("team_uuid")
        if team_uuid:
            team_id = team_repository.get_id_by_uuid(team_uuid)
            if team_id is None:
                raise RowImportError(f"Team with UUID '{team_uuid}' not found.")

        status = row.get("status") or PROJECT_STATUS_PLANNING
        if status not in PROJECT_STATUSES:
            raise RowImportError(f"Invalid status '{status}'.")

        project_repository.add(
            Project(
                id=None,
                uuid=str(uuid4()),
                name=row["name"],
                description=row.get("description") or None,
                team_id=team_id,
                created_by=creator_id,
                status=status,
                start_date=parse_optional_date(row.get("start_date"), field="start_date"),
                end_date=parse_optional_date(row.get("end_date"), field="end_date"),
            )
        )

    return run_row_import(session, rows, handle, validate=_validate)


__all__ = ["PROJECT_CSV_COLUMNS", "import_projects_from_csv"]
