"""Integration tests for the CSV import endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from teamhub.config import get_settings


@pytest.fixture()
def client():
    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


def _upload(content: str, filename: str = "data.csv") -> dict:
    return {"file": (filename, content.encode("utf-8"), "text/csv")}


def test_project_import_endpoint(client, make_user, make_team, auth_headers) -> None:
    user = make_user("user@example.com")
    team = make_team()
    csv_content = (
        "name,description,team_uuid,status,start_date,end_date\n"
        f"Alpha,,{team.uuid},planning,2024-01-01,2024-02-01\n"
        "Beta,,nope,planning,,\n"
    )

    response = client.post(
        "/projects/import", files=_upload(csv_content), headers=auth_headers(user)
    )

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "CSV processed. 1 projects created, 1 failed."
    assert body["data"] == {
        "successful": 1,
        "failed": 1,
        "errors": [{"row": 3, "reason": "Team with UUID 'nope' not found."}],
    }


def test_task_import_endpoint(client, make_user, auth_headers) -> None:
    user = make_user("user@example.com")

    response = client.post(
        "/tasks/import",
        files=_upload("title,project_uuid\nOrphan,missing\n"),
        headers=auth_headers(user),
    )

    assert response.status_code == 201
    assert response.json()["message"] == "CSV processed. 0 tasks created, 1 failed."


def test_member_import_endpoint(client, make_user, make_team, auth_headers) -> None:
    user = make_user("user@example.com")
    make_user("friend@example.com")
    team = make_team()

    response = client.post(
        f"/teams/{team.id}/members/import",
        files=_upload("email\nfriend@example.com\n"),
        headers=auth_headers(user),
    )
    missing_team = client.post(
        "/teams/999/members/import",
        files=_upload("email\nfriend@example.com\n"),
        headers=auth_headers(user),
    )

    assert response.status_code == 201
    assert response.json()["message"] == "CSV processed. 1 members invited, 0 failed."
    assert missing_team.status_code == 404


def test_upload_must_be_a_small_csv(client, make_user, auth_headers, monkeypatch) -> None:
    user = make_user("user@example.com")

    wrong_type = client.post(
        "/projects/import",
        files=_upload("name\nAlpha\n", filename="data.xlsx"),
        headers=auth_headers(user),
    )
    monkeypatch.setattr(get_settings(), "max_upload_bytes", 8)
    too_large = client.post(
        "/projects/import",
        files=_upload("name\nAlpha\nBeta\n"),
        headers=auth_headers(user),
    )

    assert wrong_type.status_code == 400
    assert too_large.status_code == 400


def test_import_requires_authentication(client) -> None:
    response = client.post("/projects/import", files=_upload("name\nAlpha\n"))

    assert response.status_code == 401


@pytest.mark.parametrize(
    "url, header",
    [
        ("/projects/csv-template", "name,description,team_uuid,status,start_date,end_date"),
        ("/tasks/csv-template", "title,description,project_uuid,assignee_email,due_date,priority,status"),
        ("/teams/1/members/csv-template", "email"),
    ],
)
def test_csv_templates(client, make_user, auth_headers, url, header) -> None:
    user = make_user("user@example.com")

    response = client.get(url, headers=auth_headers(user))

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    lines = response.text.splitlines()
    assert lines[0] == header
    assert len(lines) >= 2
