"""Use case for retrieving a single template."""

from sqlalchemy.orm import Session

from teamhub.domain.entities import Template
from teamhub.domain.errors import NotFoundError
from teamhub.infrastructure.repositories import TemplateRepository


def get_template(session: Session, template_id: int) -> Template:
    """Return the template with its full definition tree."""

    template = TemplateRepository(session).get(template_id)
    if template is None:
        raise NotFoundError("Template not found")
    return template
