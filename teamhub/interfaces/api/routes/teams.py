"""Routes for team membership imports."""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from teamhub.application.use_cases.imports import (
    import_members_from_csv as import_members_from_csv_uc,
    member_csv_template,
)
from teamhub.domain.entities import User
from teamhub.domain.errors import NotFoundError
from teamhub.infrastructure.database import get_db
from teamhub.interfaces.api.dependencies import get_current_active_user
from teamhub.interfaces.api.routes_helpers import (
    build_import_response,
    csv_download,
    read_csv_upload,
)
from teamhub.interfaces.api.schemas import ImportResponse

router = APIRouter(prefix="/teams", tags=["teams"])


@router.get("/{team_id}/members/csv-template", response_class=PlainTextResponse)
def download_member_csv_template(
    team_id: int,
    current_user: User = Depends(get_current_active_user),
) -> PlainTextResponse:
    return csv_download(member_csv_template(), filename="members-template.csv")


@router.post(
    "/{team_id}/members/import",
    response_model=ImportResponse,
    status_code=status.HTTP_201_CREATED,
)
def import_members(
    team_id: int,
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> ImportResponse:
    """Add the users listed in the uploaded CSV to the team."""

    content = read_csv_upload(file)
    try:
        result = import_members_from_csv_uc(db, team_id=team_id, content=content)
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    return build_import_response(result, noun="members", verb="invited")
