"""Shared fixtures: a throwaway SQLite database and seeded users and teams."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path
from uuid import uuid4

import pytest

TEST_DB_PATH = Path(tempfile.gettempdir()) / "teamhub_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["APP_TIMEZONE"] = "UTC"

from teamhub.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from sqlalchemy.orm import Session  # noqa: E402

from teamhub.application.use_cases.templates import (  # noqa: E402
    NewProjectDefinitionData,
    NewTaskDefinitionData,
    create_template,
)
from teamhub.application.use_cases.users import create_user  # noqa: E402
from teamhub.domain.entities import Team, TeamMember, Template, User  # noqa: E402
from teamhub.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from teamhub.infrastructure.repositories import TeamRepository  # noqa: E402
from teamhub.infrastructure.security import create_access_token  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database() -> Iterator[None]:
    """Ensure every test starts from empty tables."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session(reset_database: None) -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def make_user(session: Session) -> Callable[..., User]:
    def _make(email: str, *, role: str = "member", name: str | None = None) -> User:
        return create_user(
            session,
            name=name or email.split("@")[0].title(),
            email=email,
            role_alias=role,
        )

    return _make


@pytest.fixture()
def make_team(session: Session) -> Callable[..., Team]:
    def _make(name: str = "Core Team", *, member_ids: Sequence[int] = ()) -> Team:
        repository = TeamRepository(session)
        team = repository.create(Team(id=None, uuid=str(uuid4()), name=name))
        for user_id in member_ids:
            repository.add_member(TeamMember(team_id=team.id, user_id=user_id))
        session.commit()
        return team

    return _make


@pytest.fixture()
def onboarding_template(session: Session, make_user: Callable[..., User]) -> Template:
    """Two project definitions: the first with two tasks, the second with one."""

    author = make_user("author@example.com", role="admin")
    return create_template(
        session,
        name="Client onboarding",
        description="Standard onboarding for {client}",
        created_by=author.id,
        projects=[
            NewProjectDefinitionData(
                project_name_template="Kickoff for {client}",
                project_description_template="Kickoff meeting with {client} in {city}",
                start_day=0,
                duration_days=10,
                tasks=[
                    NewTaskDefinitionData(
                        task_name_template="Schedule call with {client}",
                        start_day=0,
                        duration_days=2,
                    ),
                    NewTaskDefinitionData(
                        task_name_template="Collect {client} requirements",
                        task_description_template="Owner: {owner}",
                        start_day=2,
                        duration_days=3,
                    ),
                ],
            ),
            NewProjectDefinitionData(
                project_name_template="Delivery for {client}",
                start_day=10,
                duration_days=5,
                tasks=[
                    NewTaskDefinitionData(
                        task_name_template="Ship {client} release",
                        start_day=2,
                        duration_days=3,
                    ),
                ],
            ),
        ],
    )


@pytest.fixture()
def auth_headers() -> Callable[[User], dict[str, str]]:
    def _headers(user: User) -> dict[str, str]:
        token = create_access_token({"sub": str(user.id)})
        return {"Authorization": f"Bearer {token}"}

    return _headers
