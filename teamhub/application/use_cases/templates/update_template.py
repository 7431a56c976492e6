"""Use case for updating templates."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from teamhub.domain.entities import Template
from teamhub.domain.errors import NotFoundError, TransactionError
from teamhub.infrastructure.repositories import TemplateRepository

from .definitions import NewProjectDefinitionData, build_project_definitions

logger = logging.getLogger(__name__)


def update_template(
    session: Session,
    *,
    template_id: int,
    name: str | None = None,
    description: str | None = None,
    projects: Sequence[NewProjectDefinitionData] | None = None,
) -> Template:
    """Update header fields and, when ``projects`` is given, replace every definition.

    Existing project and task definitions are deleted and the new set is
    inserted in the same transaction; nothing is matched or diffed.
    """

    repository = TemplateRepository(session)
    template = repository.get(template_id)
    if template is None:
        raise NotFoundError("Template not found")

    if name is not None:
        normalized_name = name.strip()
        if not normalized_name:
            raise ValueError("Template name cannot be empty")
        template.name = normalized_name
    if description is not None:
        template.description = description

    definitions = build_project_definitions(projects) if projects is not None else None

    try:
        updated = repository.update(template)
        if definitions is not None:
            updated = repository.replace_definitions(template_id, definitions)
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        raise TransactionError("Could not update the template") from exc
    except Exception:
        session.rollback()
        raise

    if definitions is not None:
        logger.info(
            "Template %s definitions replaced with %d projects",
            template_id,
            len(definitions),
        )
    return updated


__all__ = ["update_template"]
