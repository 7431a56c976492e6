"""Persistence layer for projects."""

from sqlalchemy.orm import Session

from teamhub.domain.entities import Project
from teamhub.infrastructure.models import ProjectModel
from teamhub.utils import ensure_app_timezone


class ProjectRepository:
    """Provide create and lookup operations for projects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, project: Project) -> Project:
        """Stage ``project`` in the current transaction and return it with its id."""

        model = ProjectModel(
            uuid=project.uuid,
            name=project.name,
            description=project.description,
            team_id=project.team_id,
            created_by=project.created_by,
            status=project.status,
            start_date=project.start_date,
            end_date=project.end_date,
        )
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def get_id_by_uuid(self, project_uuid: str) -> int | None:
        row = (
            self.session.query(ProjectModel.id)
            .filter(ProjectModel.uuid == project_uuid)
            .first()
        )
        return row[0] if row else None

    @staticmethod
    def _to_entity(model: ProjectModel) -> Project:
        return Project(
            id=model.id,
            uuid=model.uuid,
            name=model.name,
            description=model.description,
            team_id=model.team_id,
            created_by=model.created_by,
            status=model.status,
            start_date=model.start_date,
            end_date=model.end_date,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["ProjectRepository"]
