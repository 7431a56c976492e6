"""Bulk team membership from CSV files."""

from __future__ import annotations

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from teamhub.domain.entities import TEAM_ROLE_MEMBER, ImportResult, TeamMember
from teamhub.domain.errors import DuplicateRowError, NotFoundError, RowImportError
from teamhub.infrastructure.repositories import TeamRepository, UserRepository

from .batch import CsvRow, read_csv_rows, run_row_import

MEMBER_CSV_COLUMNS = ("email",)


def _validate(row: CsvRow) -> str | None:
    if not row.get("email"):
        return "Missing required field: email."
    return None


def import_members_from_csv(
    session: Session, *, team_id: int, content: bytes
) -> ImportResult:
    """Add the users listed by email to ``team_id`` as regular members.

    Users who already belong to the team count as failed rows but are not
    listed in the errors.
    """

    team_repository = TeamRepository(session)
    if team_repository.get(team_id) is None:
        raise NotFoundError("Team not found")

    rows = read_csv_rows(content)
    user_repository = UserRepository(session)

    def handle(_: Session, row: CsvRow) -> None:
        email = row["email"]
        user = user_repository.get_by_email(email)
        if user is None:
            raise RowImportError(f"User with email '{email}' not found.")
        if team_repository.is_member(team_id, user.id):
            raise DuplicateRowError(f"User with email '{email}' is already a member.")
        try:
            team_repository.add_member(
                TeamMember(team_id=team_id, user_id=user.id, role=TEAM_ROLE_MEMBER)
            )
        except IntegrityError as exc:
            raise DuplicateRowError(
                f"User with email '{email}' is already a member."
            ) from exc

    return run_row_import(session, rows, handle, validate=_validate)


__all__ = ["MEMBER_CSV_COLUMNS", "import_members_from_csv"]
