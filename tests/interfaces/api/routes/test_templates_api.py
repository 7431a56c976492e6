"""Integration tests for the template endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from teamhub.infrastructure.models import ProjectModel, TaskModel


@pytest.fixture()
def client():
    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


TEMPLATE_PAYLOAD = {
    "name": "Sprint kit",
    "description": "Two-week sprint for {squad}",
    "projects": [
        {
            "project_name_template": "Sprint {number} for {squad}",
            "start_day": 0,
            "duration_days": 14,
            "tasks": [
                {"task_name_template": "Planning", "start_day": 0, "duration_days": 1},
                {"title": "Demo for {squad}", "start_day": 12, "duration_days": 2},
            ],
        },
        {"name": "Retro {number}", "start_day": 14, "duration_days": 1},
    ],
}


def test_admin_can_create_and_read_template(client, make_user, auth_headers) -> None:
    admin = make_user("admin@example.com", role="admin")

    response = client.post("/templates/", json=TEMPLATE_PAYLOAD, headers=auth_headers(admin))

    assert response.status_code == 201
    body = response.json()
    assert body["created_by"] == admin.id
    assert [p["project_name_template"] for p in body["projects"]] == [
        "Sprint {number} for {squad}",
        "Retro {number}",
    ]
    assert body["projects"][0]["tasks"][1]["task_name_template"] == "Demo for {squad}"

    detail = client.get(f"/templates/{body['id']}", headers=auth_headers(admin))
    assert detail.status_code == 200
    assert detail.json() == body


def test_template_roles_are_enforced(client, make_user, auth_headers) -> None:
    manager = make_user("manager@example.com", role="manager")
    member = make_user("member@example.com")

    assert client.post(
        "/templates/", json=TEMPLATE_PAYLOAD, headers=auth_headers(manager)
    ).status_code == 403
    assert client.get("/templates/", headers=auth_headers(member)).status_code == 403
    assert client.get("/templates/", headers=auth_headers(manager)).status_code == 200
    assert client.get("/templates/").status_code == 401


def test_invalid_token_is_rejected(client) -> None:
    response = client.get("/templates/", headers={"Authorization": "Bearer not-a-token"})

    assert response.status_code == 401


def test_missing_template_returns_404(client, make_user, auth_headers) -> None:
    admin = make_user("admin@example.com", role="admin")

    assert client.get("/templates/77", headers=auth_headers(admin)).status_code == 404
    assert client.delete("/templates/77", headers=auth_headers(admin)).status_code == 404


def test_update_replaces_definitions(client, make_user, auth_headers) -> None:
    admin = make_user("admin@example.com", role="admin")
    created = client.post(
        "/templates/", json=TEMPLATE_PAYLOAD, headers=auth_headers(admin)
    ).json()

    response = client.put(
        f"/templates/{created['id']}",
        json={"projects": [{"project_name_template": "Only one"}]},
        headers=auth_headers(admin),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Sprint kit"
    assert [p["project_name_template"] for p in body["projects"]] == ["Only one"]
    assert body["projects"][0]["tasks"] == []


def test_delete_template(client, make_user, auth_headers) -> None:
    admin = make_user("admin@example.com", role="admin")
    created = client.post(
        "/templates/", json=TEMPLATE_PAYLOAD, headers=auth_headers(admin)
    ).json()

    response = client.delete(f"/templates/{created['id']}", headers=auth_headers(admin))

    assert response.status_code == 204
    assert client.get(
        f"/templates/{created['id']}", headers=auth_headers(admin)
    ).status_code == 404


def test_generate_projects_from_template(
    client, session, make_user, make_team, auth_headers
) -> None:
    admin = make_user("admin@example.com", role="admin")
    manager = make_user("manager@example.com", role="manager")
    team = make_team()
    created = client.post(
        "/templates/", json=TEMPLATE_PAYLOAD, headers=auth_headers(admin)
    ).json()

    response = client.post(
        f"/templates/{created['id']}/generate",
        json={
            "team_id": team.id,
            "start_date": "2024-01-01",
            "variables": {"squad": "Falcons", "number": "7"},
        },
        headers=auth_headers(manager),
    )

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Projects generated successfully."
    assert len(body["project_ids"]) == 2

    session.expire_all()
    names = sorted(p.name for p in session.query(ProjectModel))
    assert names == ["Retro 7", "Sprint 7 for Falcons"]
    assert session.query(TaskModel).count() == 2


def test_generate_rejects_bad_input(client, make_user, make_team, auth_headers) -> None:
    admin = make_user("admin@example.com", role="admin")
    team = make_team()
    created = client.post(
        "/templates/", json=TEMPLATE_PAYLOAD, headers=auth_headers(admin)
    ).json()
    url = f"/templates/{created['id']}/generate"

    bad_date = client.post(
        url,
        json={"team_id": team.id, "start_date": "yesterday"},
        headers=auth_headers(admin),
    )
    missing_team = client.post(
        url,
        json={"team_id": 999, "start_date": "2024-01-01"},
        headers=auth_headers(admin),
    )
    missing_template = client.post(
        "/templates/999/generate",
        json={"team_id": team.id, "start_date": "2024-01-01"},
        headers=auth_headers(admin),
    )

    assert bad_date.status_code == 400
    assert missing_team.status_code == 404
    assert missing_template.status_code == 404


def test_create_rejects_offsets_beyond_the_limit(
    client, make_user, auth_headers
) -> None:
    admin = make_user("admin@example.com", role="admin")
    payload = {"name": "Forever", "projects": [{"name": "P", "start_day": 10**20}]}

    response = client.post("/templates/", json=payload, headers=auth_headers(admin))

    assert response.status_code == 422
    assert client.get("/templates/", headers=auth_headers(admin)).json() == []


def test_generate_past_the_calendar_limit_returns_400(
    client, session, make_user, make_team, auth_headers
) -> None:
    admin = make_user("admin@example.com", role="admin")
    team = make_team()
    created = client.post(
        "/templates/", json=TEMPLATE_PAYLOAD, headers=auth_headers(admin)
    ).json()

    response = client.post(
        f"/templates/{created['id']}/generate",
        json={"team_id": team.id, "start_date": "9999-12-20"},
        headers=auth_headers(admin),
    )

    assert response.status_code == 400
    assert "out of range" in response.json()["detail"]
    session.expire_all()
    assert session.query(ProjectModel).count() == 0
