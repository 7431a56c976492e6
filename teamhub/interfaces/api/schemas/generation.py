"""Schemas for generating projects from a template."""

from pydantic import BaseModel, ConfigDict, Field


class GenerationRequest(BaseModel):
    team_id: int
    start_date: str = Field(..., description="Master start date in YYYY-MM-DD format")
    variables: dict[str, str] = Field(default_factory=dict)


class GenerationResponse(BaseModel):
    success: bool
    message: str
    project_ids: list[int] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


__all__ = ["GenerationRequest", "GenerationResponse"]
