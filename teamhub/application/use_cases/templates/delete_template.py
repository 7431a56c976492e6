"""Use case for deleting templates."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from teamhub.domain.errors import NotFoundError, TransactionError
from teamhub.infrastructure.repositories import TemplateRepository


def delete_template(session: Session, template_id: int) -> None:
    """Delete the template and its definitions; generated projects are kept."""

    repository = TemplateRepository(session)
    if not repository.exists(template_id):
        raise NotFoundError("Template not found")

    try:
        repository.delete(template_id)
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        raise TransactionError("Could not delete the template") from exc
