"""Tests for the CSV import pipeline and its importers."""

from __future__ import annotations

import logging
from datetime import date
from uuid import uuid4

import pytest

from teamhub.application.use_cases.imports import (
    import_members_from_csv,
    import_projects_from_csv,
    import_tasks_from_csv,
    member_csv_template,
    project_csv_template,
    read_csv_rows,
    run_row_import,
    task_csv_template,
)
from teamhub.domain.entities import Project, RowError
from teamhub.domain.errors import NotFoundError, RowImportError
from teamhub.infrastructure.models import ProjectModel, TaskModel, TeamMemberModel
from teamhub.infrastructure.repositories import ProjectRepository


def _csv(*lines: str) -> bytes:
    return ("\n".join(lines) + "\n").encode("utf-8")


def test_read_csv_rows_returns_text_values() -> None:
    rows = read_csv_rows(_csv("name , count,notes", "Alpha, 007,", "Beta,2,x"))

    assert rows == [
        {"name": "Alpha", "count": "007", "notes": ""},
        {"name": "Beta", "count": "2", "notes": "x"},
    ]


def test_read_csv_rows_handles_empty_and_header_only_files() -> None:
    assert read_csv_rows(b"") == []
    assert read_csv_rows(_csv("email")) == []


def test_read_csv_rows_strips_utf8_bom() -> None:
    rows = read_csv_rows("\ufeffemail\nann@example.com\n".encode("utf-8"))

    assert rows == [{"email": "ann@example.com"}]


def test_csv_templates_parse_back_into_example_rows() -> None:
    projects = read_csv_rows(project_csv_template().encode("utf-8"))
    tasks = read_csv_rows(task_csv_template().encode("utf-8"))
    members = read_csv_rows(member_csv_template().encode("utf-8"))

    assert projects[0]["name"] == "New Marketing Campaign"
    assert projects[0]["end_date"] == "2025-03-31"
    assert tasks[0]["assignee_email"] == "member@example.com"
    assert tasks[0]["priority"] == "high"
    assert members == [{"email": "member1@example.com"}, {"email": "member2@example.com"}]


def test_run_row_import_rolls_back_only_the_failing_row(session, make_user) -> None:
    creator = make_user("creator@example.com")
    repository = ProjectRepository(session)

    def handler(_, row):
        repository.add(
            Project(
                id=None,
                uuid=str(uuid4()),
                name=row["name"],
                description=None,
                team_id=None,
                created_by=creator.id,
                status="planning",
                start_date=None,
                end_date=None,
            )
        )
        if row["name"] == "bad":
            raise RowImportError("rejected after insert")

    result = run_row_import(
        session, [{"name": "one"}, {"name": "bad"}, {"name": "two"}], handler
    )

    assert (result.successful, result.failed) == (2, 1)
    assert result.errors == [RowError(row=3, reason="rejected after insert")]
    session.expire_all()
    assert sorted(p.name for p in session.query(ProjectModel)) == ["one", "two"]


def test_run_row_import_records_unexpected_handler_errors(
    session, make_user, caplog
) -> None:
    creator = make_user("creator@example.com")
    repository = ProjectRepository(session)

    def handler(_, row):
        repository.add(
            Project(
                id=None,
                uuid=str(uuid4()),
                name=row["name"],
                description=None,
                team_id=None,
                created_by=creator.id,
                status="planning",
                start_date=None,
                end_date=None,
            )
        )
        if row["name"] == "broken":
            raise KeyError("owner")

    caplog.set_level(logging.ERROR)
    result = run_row_import(session, [{"name": "broken"}, {"name": "kept"}], handler)

    assert (result.successful, result.failed) == (1, 1)
    assert result.errors == [RowError(row=2, reason="'owner'")]
    assert "CSV row 2 failed" in caplog.text
    session.expire_all()
    assert [p.name for p in session.query(ProjectModel)] == ["kept"]


def test_project_import_reports_bad_team_and_continues(
    session, make_user, make_team
) -> None:
    creator = make_user("creator@example.com")
    team = make_team()
    content = _csv(
        "name,description,team_uuid,status,start_date,end_date",
        f"Alpha,,{team.uuid},planning,2024-01-01,2024-02-01",
        f"Beta,Second,{team.uuid},in_progress,,",
        "Gamma,,missing-team,planning,,",
        "Delta,,,completed,2024-03-01,",
        f"Epsilon,,{team.uuid},,,",
    )

    result = import_projects_from_csv(session, content=content, creator_id=creator.id)

    assert result.successful == 4
    assert result.failed == 1
    assert result.errors == [
        RowError(row=4, reason="Team with UUID 'missing-team' not found.")
    ]

    session.expire_all()
    projects = {p.name: p for p in session.query(ProjectModel)}
    assert set(projects) == {"Alpha", "Beta", "Delta", "Epsilon"}
    assert projects["Alpha"].start_date == date(2024, 1, 1)
    assert projects["Delta"].team_id is None
    assert projects["Epsilon"].status == "planning"
    assert projects["Beta"].created_by == creator.id


def test_project_import_validates_required_name_and_dates(session, make_user) -> None:
    creator = make_user("creator@example.com")
    content = _csv(
        "name,description,team_uuid,status,start_date,end_date",
        ",no name,,,,",
        "Late,,,,31/12/2024,",
        "Odd,,,archived,,",
    )

    result = import_projects_from_csv(session, content=content, creator_id=creator.id)

    assert result.successful == 0
    assert result.errors == [
        RowError(row=2, reason="Missing required field: name."),
        RowError(row=3, reason="Invalid start_date '31/12/2024'. Use YYYY-MM-DD."),
        RowError(row=4, reason="Invalid status 'archived'."),
    ]


@pytest.fixture()
def project(session, make_user, make_team):
    owner = make_user("owner@example.com")
    return ProjectRepository(session).add(
        Project(
            id=None,
            uuid="project-uuid-123",
            name="Website",
            description=None,
            team_id=make_team().id,
            created_by=owner.id,
            status="planning",
            start_date=None,
            end_date=None,
        )
    )


def test_task_import_resolves_project_and_assignee(session, make_user, project) -> None:
    session.commit()
    reporter = make_user("reporter@example.com")
    assignee = make_user("dev@example.com")
    content = _csv(
        "title,description,project_uuid,assignee_email,due_date,priority,status",
        "Design,,project-uuid-123,dev@example.com,2024-12-31,high,in_progress",
        "Build,,project-uuid-123,,,,",
        ",Missing title,project-uuid-123,,,,",
        "Deploy,,unknown-project,,,,",
        "Review,,project-uuid-123,ghost@example.com,,,",
    )

    result = import_tasks_from_csv(session, content=content, reporter_id=reporter.id)

    assert (result.successful, result.failed) == (2, 3)
    assert result.errors == [
        RowError(row=4, reason="Missing required fields: title and project_uuid."),
        RowError(row=5, reason="Project with UUID 'unknown-project' not found."),
        RowError(row=6, reason="Assignee with email 'ghost@example.com' not found."),
    ]

    session.expire_all()
    tasks = {t.title: t for t in session.query(TaskModel)}
    assert tasks["Design"].assignee_id == assignee.id
    assert tasks["Design"].priority == "high"
    assert tasks["Design"].due_date == date(2024, 12, 31)
    assert tasks["Build"].priority == "medium"
    assert tasks["Build"].status == "todo"
    assert tasks["Build"].reporter_id == reporter.id


def test_member_import_skips_duplicates_silently(session, make_user, make_team) -> None:
    existing = make_user("existing@example.com")
    make_user("new@example.com")
    team = make_team(member_ids=[existing.id])
    content = _csv(
        "email",
        "new@example.com",
        "existing@example.com",
        "nobody@example.com",
        "NEW@example.com",
    )

    result = import_members_from_csv(session, team_id=team.id, content=content)

    assert result.successful == 1
    assert result.failed == 3
    assert result.errors == [
        RowError(row=4, reason="User with email 'nobody@example.com' not found."),
    ]
    session.expire_all()
    assert session.query(TeamMemberModel).filter_by(team_id=team.id).count() == 2


def test_member_import_requires_existing_team(session) -> None:
    with pytest.raises(NotFoundError):
        import_members_from_csv(session, team_id=99, content=_csv("email", "a@b.c"))
