"""Pydantic schemas used by the HTTP API."""

from .generation import GenerationRequest, GenerationResponse
from .imports import ImportResponse, ImportResultRead, RowErrorRead
from .template import (
    ProjectDefinitionCreate,
    ProjectDefinitionRead,
    TaskDefinitionCreate,
    TaskDefinitionRead,
    TemplateCreate,
    TemplateRead,
    TemplateSummaryRead,
    TemplateUpdate,
)

__all__ = [
    "GenerationRequest",
    "GenerationResponse",
    "ImportResponse",
    "ImportResultRead",
    "ProjectDefinitionCreate",
    "ProjectDefinitionRead",
    "RowErrorRead",
    "TaskDefinitionCreate",
    "TaskDefinitionRead",
    "TemplateCreate",
    "TemplateRead",
    "TemplateSummaryRead",
    "TemplateUpdate",
]
