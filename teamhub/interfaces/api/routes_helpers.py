"""Helper utilities shared across the CSV import route handlers."""

from pathlib import Path

from fastapi import HTTPException, UploadFile, status
from fastapi.responses import PlainTextResponse

from teamhub.config import get_settings
from teamhub.domain.entities import ImportResult
from teamhub.interfaces.api.schemas import ImportResponse, ImportResultRead


def read_csv_upload(file: UploadFile) -> bytes:
    """Return the uploaded bytes after checking extension and size."""

    filename = file.filename or ""
    if Path(filename).suffix.lower() != ".csv":
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only .csv files are allowed!",
        )

    max_bytes = get_settings().max_upload_bytes
    try:
        content = file.file.read(max_bytes + 1)
    finally:
        file.file.seek(0)

    if len(content) > max_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"File too large. The maximum size is {max_bytes // (1024 * 1024)}MB.",
        )
    if not content:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No file uploaded.",
        )
    return content


def build_import_response(result: ImportResult, *, noun: str, verb: str) -> ImportResponse:
    return ImportResponse(
        message=f"CSV processed. {result.successful} {noun} {verb}, {result.failed} failed.",
        data=ImportResultRead.model_validate(result),
    )


def csv_download(content: str, *, filename: str) -> PlainTextResponse:
    return PlainTextResponse(
        content,
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
