"""Schemas describing CSV import outcomes."""

from pydantic import BaseModel, ConfigDict, Field


class RowErrorRead(BaseModel):
    row: int
    reason: str

    model_config = ConfigDict(from_attributes=True)


class ImportResultRead(BaseModel):
    successful: int
    failed: int
    errors: list[RowErrorRead] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class ImportResponse(BaseModel):
    success: bool = True
    message: str
    data: ImportResultRead


__all__ = ["ImportResponse", "ImportResultRead", "RowErrorRead"]
