"""Routes for managing templates and generating projects from them."""

from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from teamhub.application.use_cases.templates import (
    NewProjectDefinitionData,
    NewTaskDefinitionData,
    create_template as create_template_uc,
    delete_template as delete_template_uc,
    generate_from_template as generate_from_template_uc,
    get_template as get_template_uc,
    list_templates as list_templates_uc,
    update_template as update_template_uc,
)
from teamhub.domain.entities import GenerationParams, Template, User
from teamhub.domain.errors import NotFoundError, TransactionError
from teamhub.infrastructure.database import get_db
from teamhub.interfaces.api.dependencies import require_admin, require_template_manager
from teamhub.interfaces.api.schemas import (
    GenerationRequest,
    GenerationResponse,
    ProjectDefinitionCreate,
    TemplateCreate,
    TemplateRead,
    TemplateSummaryRead,
    TemplateUpdate,
)

router = APIRouter(prefix="/templates", tags=["templates"])


def _template_to_read_model(template: Template) -> TemplateRead:
    return TemplateRead.model_validate(template)


def _map_definitions(
    projects: list[ProjectDefinitionCreate],
) -> list[NewProjectDefinitionData]:
    return [
        NewProjectDefinitionData(
            project_name_template=project.project_name_template,
            project_description_template=project.project_description_template,
            start_day=project.start_day,
            duration_days=project.duration_days,
            tasks=[
                NewTaskDefinitionData(
                    task_name_template=task.task_name_template,
                    task_description_template=task.task_description_template,
                    start_day=task.start_day,
                    duration_days=task.duration_days,
                )
                for task in project.tasks
            ],
        )
        for project in projects
    ]


def _raise_http_error(exc: Exception) -> NoReturn:
    if isinstance(exc, NotFoundError):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    if isinstance(exc, PermissionError):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exc)) from exc
    if isinstance(exc, TransactionError):
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
        ) from exc
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.post("/", response_model=TemplateRead, status_code=status.HTTP_201_CREATED)
def register_template(
    template_in: TemplateCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> TemplateRead:
    """Create a template together with its project and task definitions."""

    try:
        template = create_template_uc(
            db,
            name=template_in.name,
            description=template_in.description,
            projects=_map_definitions(template_in.projects),
            created_by=current_user.id,
        )
    except (ValueError, TransactionError) as exc:
        _raise_http_error(exc)

    return _template_to_read_model(template)


@router.get("/", response_model=list[TemplateSummaryRead])
def list_templates(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_template_manager),
) -> list[TemplateSummaryRead]:
    """Return a paginated list of templates, newest first."""

    templates = list_templates_uc(db, skip=skip, limit=limit)
    return [TemplateSummaryRead.model_validate(template) for template in templates]


@router.get("/{template_id}", response_model=TemplateRead)
def read_template(
    template_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_template_manager),
) -> TemplateRead:
    try:
        template = get_template_uc(db, template_id)
    except ValueError as exc:
        _raise_http_error(exc)
    return _template_to_read_model(template)


@router.put("/{template_id}", response_model=TemplateRead)
def update_template(
    template_id: int,
    template_in: TemplateUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> TemplateRead:
    """Update a template; a ``projects`` list replaces all of its definitions."""

    projects = (
        _map_definitions(template_in.projects)
        if template_in.projects is not None
        else None
    )
    try:
        template = update_template_uc(
            db,
            template_id=template_id,
            name=template_in.name,
            description=template_in.description,
            projects=projects,
        )
    except (ValueError, TransactionError) as exc:
        _raise_http_error(exc)

    return _template_to_read_model(template)


@router.delete("/{template_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_template(
    template_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_admin),
) -> Response:
    try:
        delete_template_uc(db, template_id)
    except (ValueError, TransactionError) as exc:
        _raise_http_error(exc)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{template_id}/generate",
    response_model=GenerationResponse,
    status_code=status.HTTP_201_CREATED,
)
def generate_projects(
    template_id: int,
    payload: GenerationRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_template_manager),
) -> GenerationResponse:
    """Instantiate the template into projects and tasks for a team."""

    params = GenerationParams(
        team_id=payload.team_id,
        start_date=payload.start_date,
        variables=dict(payload.variables),
    )
    try:
        result = generate_from_template_uc(
            db,
            template_id=template_id,
            params=params,
            user_id=current_user.id,
        )
    except (ValueError, TransactionError) as exc:
        _raise_http_error(exc)

    return GenerationResponse.model_validate(result)
