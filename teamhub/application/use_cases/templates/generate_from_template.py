"""Use case that instantiates a template into dated projects and tasks."""

from __future__ import annotations

import logging
from datetime import date
from uuid import uuid4

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from teamhub.application.use_cases.notifications import notify_project_assigned
from teamhub.domain.entities import (
    PROJECT_STATUS_PLANNING,
    TASK_PRIORITY_MEDIUM,
    TASK_STATUS_TODO,
    GenerationParams,
    GenerationResult,
    Project,
    ProjectDefinition,
    Task,
)
from teamhub.domain.errors import NotFoundError, TransactionError
from teamhub.infrastructure.repositories import (
    ProjectRepository,
    TaskRepository,
    TeamRepository,
    TemplateRepository,
)

from .placeholders import substitute_object
from .scheduling import compute_project_dates, compute_task_dates, parse_start_date

logger = logging.getLogger(__name__)

GENERATION_SUCCESS_MESSAGE = "Projects generated successfully."


def generate_from_template(
    session: Session,
    *,
    template_id: int,
    params: GenerationParams,
    user_id: int,
    notify: bool = True,
) -> GenerationResult:
    """Create one project per definition of the template, with its tasks.

    Every insert happens in a single transaction on ``session``: either all
    projects and tasks are committed or none are. Team members are notified
    afterwards; a notification failure is logged and does not undo the
    generation.
    """

    template = TemplateRepository(session).get(template_id)
    if template is None:
        raise NotFoundError("Template not found")

    master_start = parse_start_date(params.start_date)

    team_repository = TeamRepository(session)
    if team_repository.get(params.team_id) is None:
        raise NotFoundError("Team not found")

    variables = {str(key): str(value) for key, value in (params.variables or {}).items()}
    project_repository = ProjectRepository(session)
    task_repository = TaskRepository(session)
    created: list[Project] = []

    try:
        for definition in template.projects:
            created.append(
                _instantiate_project(
                    definition,
                    master_start=master_start,
                    variables=variables,
                    team_id=params.team_id,
                    user_id=user_id,
                    project_repository=project_repository,
                    task_repository=task_repository,
                )
            )
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.error("Generation from template %s rolled back: %s", template_id, exc)
        raise TransactionError("Failed to generate projects from template.") from exc
    except Exception:
        session.rollback()
        raise

    logger.info(
        "Generated %d projects from template %s for team %s",
        len(created),
        template_id,
        params.team_id,
    )

    if notify and created:
        _notify_team(session, team_id=params.team_id, user_id=user_id, projects=created)

    return GenerationResult(
        success=True,
        message=GENERATION_SUCCESS_MESSAGE,
        project_ids=tuple(project.id for project in created),
    )


def _instantiate_project(
    definition: ProjectDefinition,
    *,
    master_start: date,
    variables: dict[str, str],
    team_id: int,
    user_id: int,
    project_repository: ProjectRepository,
    task_repository: TaskRepository,
) -> Project:
    texts = substitute_object(
        {
            "name": definition.project_name_template,
            "description": definition.project_description_template,
        },
        variables,
    )
    start, end = compute_project_dates(master_start, definition)
    project = project_repository.add(
        Project(
            id=None,
            uuid=str(uuid4()),
            name=texts["name"],
            description=texts["description"],
            team_id=team_id,
            created_by=user_id,
            status=PROJECT_STATUS_PLANNING,
            start_date=start,
            end_date=end,
        )
    )

    for task_definition in definition.tasks:
        task_texts = substitute_object(
            {
                "title": task_definition.task_name_template,
                "description": task_definition.task_description_template,
            },
            variables,
        )
        # only the due date is stored; tasks have no start column
        _, due = compute_task_dates(start, task_definition)
        task_repository.add(
            Task(
                id=None,
                uuid=str(uuid4()),
                title=task_texts["title"],
                description=task_texts["description"],
                project_id=project.id,
                reporter_id=user_id,
                status=TASK_STATUS_TODO,
                due_date=due,
                priority=TASK_PRIORITY_MEDIUM,
            )
        )
    return project


def _notify_team(
    session: Session, *, team_id: int, user_id: int, projects: list[Project]
) -> None:
    try:
        member_ids = TeamRepository(session).list_member_ids(team_id)
        for project in projects:
            notify_project_assigned(
                session,
                assigner_id=user_id,
                team_member_ids=member_ids,
                project_id=project.id,
                project_name=project.name,
            )
    except Exception:
        logger.exception(
            "Failed to send project assignment notifications for team %s", team_id
        )
        session.rollback()


__all__ = ["GENERATION_SUCCESS_MESSAGE", "generate_from_template"]
