"""Schemas for template endpoints."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from teamhub.domain.entities import MAX_OFFSET_DAYS


class TaskDefinitionBase(BaseModel):
    task_name_template: str = Field(
        ...,
        min_length=1,
        max_length=255,
        validation_alias=AliasChoices("task_name_template", "title"),
    )
    task_description_template: str | None = Field(
        default=None,
        validation_alias=AliasChoices("task_description_template", "description"),
    )
    start_day: int | None = Field(default=0, ge=0, le=MAX_OFFSET_DAYS)
    duration_days: int | None = Field(default=1, ge=0, le=MAX_OFFSET_DAYS)


class TaskDefinitionCreate(TaskDefinitionBase):
    """Task definition accepted when creating or replacing a template."""


class TaskDefinitionRead(TaskDefinitionBase):
    id: int
    template_project_id: int

    model_config = ConfigDict(from_attributes=True)


class ProjectDefinitionBase(BaseModel):
    project_name_template: str = Field(
        ...,
        min_length=1,
        max_length=255,
        validation_alias=AliasChoices("project_name_template", "name"),
    )
    project_description_template: str | None = Field(
        default=None,
        validation_alias=AliasChoices("project_description_template", "description"),
    )
    start_day: int | None = Field(default=0, ge=0, le=MAX_OFFSET_DAYS)
    duration_days: int | None = Field(default=1, ge=0, le=MAX_OFFSET_DAYS)


class ProjectDefinitionCreate(ProjectDefinitionBase):
    tasks: list[TaskDefinitionCreate] = Field(default_factory=list)


class ProjectDefinitionRead(ProjectDefinitionBase):
    id: int
    template_id: int
    tasks: list[TaskDefinitionRead] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class TemplateBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = None


class TemplateCreate(TemplateBase):
    """Payload required to create a template with its definitions."""

    projects: list[ProjectDefinitionCreate] = Field(default_factory=list)


class TemplateUpdate(BaseModel):
    """Partial update of a template.

    A ``projects`` list replaces every existing definition and an empty list
    clears them. Leaving ``projects`` out keeps the current definitions as they
    are; only ``name`` and ``description`` change.
    """

    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    projects: list[ProjectDefinitionCreate] | None = None

    model_config = ConfigDict(extra="forbid")


class TemplateSummaryRead(TemplateBase):
    id: int
    created_by: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class TemplateRead(TemplateSummaryRead):
    projects: list[ProjectDefinitionRead] = Field(default_factory=list)


__all__ = [
    "ProjectDefinitionCreate",
    "ProjectDefinitionRead",
    "TaskDefinitionCreate",
    "TaskDefinitionRead",
    "TemplateCreate",
    "TemplateRead",
    "TemplateSummaryRead",
    "TemplateUpdate",
]
