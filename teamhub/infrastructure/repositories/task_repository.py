"""Persistence layer for tasks."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from teamhub.domain.entities import Task
from teamhub.infrastructure.models import TaskModel
from teamhub.utils import ensure_app_timezone


class TaskRepository:
    """Provide create and lookup operations for tasks."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def add(self, task: Task) -> Task:
        model = TaskModel(
            uuid=task.uuid,
            title=task.title,
            description=task.description,
            project_id=task.project_id,
            assignee_id=task.assignee_id,
            reporter_id=task.reporter_id,
            status=task.status,
            priority=task.priority,
            due_date=task.due_date,
        )
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def list_by_project(self, project_id: int) -> Sequence[Task]:
        query = (
            self.session.query(TaskModel)
            .filter(TaskModel.project_id == project_id)
            .order_by(TaskModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: TaskModel) -> Task:
        return Task(
            id=model.id,
            uuid=model.uuid,
            title=model.title,
            description=model.description,
            project_id=model.project_id,
            reporter_id=model.reporter_id,
            status=model.status,
            due_date=model.due_date,
            assignee_id=model.assignee_id,
            priority=model.priority,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["TaskRepository"]
