"""Use case for creating templates."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from teamhub.domain.entities import Template
from teamhub.domain.errors import TransactionError
from teamhub.infrastructure.repositories import TemplateRepository

from .definitions import NewProjectDefinitionData, build_project_definitions

logger = logging.getLogger(__name__)


def create_template(
    session: Session,
    *,
    name: str,
    description: str | None = None,
    projects: Sequence[NewProjectDefinitionData] = (),
    created_by: int | None = None,
) -> Template:
    """Create a template together with its project and task definitions."""

    normalized_name = (name or "").strip()
    if not normalized_name:
        raise ValueError("Template name cannot be empty")

    definitions = build_project_definitions(projects)
    template = Template(
        id=None,
        name=normalized_name,
        description=description,
        created_by=created_by,
        created_at=None,
        updated_at=None,
        projects=definitions,
    )

    try:
        saved = TemplateRepository(session).create(template)
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        raise TransactionError("Could not create the template") from exc
    except Exception:
        session.rollback()
        raise

    logger.info(
        "Template %s created with %d project definitions", saved.id, len(saved.projects)
    )
    return saved


__all__ = ["create_template"]
