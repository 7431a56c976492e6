"""Routes for bulk project creation."""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from teamhub.application.use_cases.imports import (
    import_projects_from_csv as import_projects_from_csv_uc,
    project_csv_template,
)
from teamhub.domain.entities import User
from teamhub.infrastructure.database import get_db
from teamhub.interfaces.api.dependencies import get_current_active_user
from teamhub.interfaces.api.routes_helpers import (
    build_import_response,
    csv_download,
    read_csv_upload,
)
from teamhub.interfaces.api.schemas import ImportResponse

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("/csv-template", response_class=PlainTextResponse)
def download_project_csv_template(
    current_user: User = Depends(get_current_active_user),
) -> PlainTextResponse:
    return csv_download(project_csv_template(), filename="projects-template.csv")


@router.post(
    "/import",
    response_model=ImportResponse,
    status_code=status.HTTP_201_CREATED,
)
def import_projects(
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ImportResponse:
    """Create projects from an uploaded CSV, one transaction per row."""

    content = read_csv_upload(file)
    try:
        result = import_projects_from_csv_uc(
            db, content=content, creator_id=current_user.id
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return build_import_response(result, noun="projects", verb="created")
