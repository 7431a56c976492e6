"""Persistence layer for templates and their nested definitions."""

from collections.abc import Sequence

from sqlalchemy.orm import Session, selectinload

from teamhub.domain.entities import ProjectDefinition, TaskDefinition, Template
from teamhub.infrastructure.models import (
    TemplateModel,
    TemplateProjectModel,
    TemplateTaskModel,
)
from teamhub.utils import ensure_app_timezone, now_in_app_naive_datetime


class TemplateRepository:
    """Provide CRUD operations for templates.

    Methods flush but never commit; the calling use case owns the transaction.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, *, skip: int = 0, limit: int = 100) -> Sequence[Template]:
        query = self.session.query(TemplateModel).order_by(
            TemplateModel.created_at.desc(), TemplateModel.id.desc()
        )
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [
            self._to_entity(model, include_definitions=False) for model in query.all()
        ]

    def get(self, template_id: int) -> Template | None:
        model = self._get_model(template_id)
        return self._to_entity(model) if model else None

    def exists(self, template_id: int) -> bool:
        return (
            self.session.query(TemplateModel.id)
            .filter(TemplateModel.id == template_id)
            .first()
            is not None
        )

    def create(self, template: Template) -> Template:
        now = now_in_app_naive_datetime()
        model = TemplateModel(
            name=template.name,
            description=template.description,
            created_by=template.created_by,
            created_at=now,
            updated_at=now,
        )
        model.projects = [self._build_project_model(p) for p in template.projects]
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def update(self, template: Template) -> Template:
        model = self._get_model(template.id)
        if model is None:
            msg = f"Template with id {template.id} not found"
            raise ValueError(msg)
        model.name = template.name
        model.description = template.description
        model.updated_at = now_in_app_naive_datetime()
        self.session.flush()
        return self._to_entity(model)

    def replace_definitions(
        self, template_id: int, projects: Sequence[ProjectDefinition]
    ) -> Template:
        """Delete every project/task definition of the template and insert ``projects``."""

        model = self._get_model(template_id)
        if model is None:
            msg = f"Template with id {template_id} not found"
            raise ValueError(msg)

        # delete-orphan cascades remove the nested task definitions as well
        model.projects.clear()
        self.session.flush()

        model.projects.extend(self._build_project_model(p) for p in projects)
        model.updated_at = now_in_app_naive_datetime()
        self.session.flush()
        return self._to_entity(model)

    def delete(self, template_id: int) -> None:
        model = self._get_model(template_id)
        if model is None:
            msg = f"Template with id {template_id} not found"
            raise ValueError(msg)
        self.session.delete(model)
        self.session.flush()

    def _get_model(self, template_id: int | None) -> TemplateModel | None:
        if template_id is None:
            return None
        return (
            self.session.query(TemplateModel)
            .options(
                selectinload(TemplateModel.projects).selectinload(
                    TemplateProjectModel.tasks
                )
            )
            .filter(TemplateModel.id == template_id)
            .first()
        )

    @staticmethod
    def _build_project_model(definition: ProjectDefinition) -> TemplateProjectModel:
        model = TemplateProjectModel(
            project_name_template=definition.project_name_template,
            project_description_template=definition.project_description_template,
            start_day=definition.start_day,
            duration_days=definition.duration_days,
        )
        model.tasks = [
            TemplateTaskModel(
                task_name_template=task.task_name_template,
                task_description_template=task.task_description_template,
                start_day=task.start_day,
                duration_days=task.duration_days,
            )
            for task in definition.tasks
        ]
        return model

    @staticmethod
    def _to_entity(
        model: TemplateModel, *, include_definitions: bool = True
    ) -> Template:
        projects: list[ProjectDefinition] = []
        if include_definitions:
            projects = [
                TemplateRepository._project_to_entity(project)
                for project in sorted(model.projects, key=lambda p: p.id or 0)
            ]
        return Template(
            id=model.id,
            name=model.name,
            description=model.description,
            created_by=model.created_by,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            projects=projects,
        )

    @staticmethod
    def _project_to_entity(model: TemplateProjectModel) -> ProjectDefinition:
        return ProjectDefinition(
            id=model.id,
            template_id=model.template_id,
            project_name_template=model.project_name_template,
            project_description_template=model.project_description_template,
            start_day=model.start_day,
            duration_days=model.duration_days,
            tasks=[
                TaskDefinition(
                    id=task.id,
                    template_project_id=task.template_project_id,
                    task_name_template=task.task_name_template,
                    task_description_template=task.task_description_template,
                    start_day=task.start_day,
                    duration_days=task.duration_days,
                )
                for task in sorted(model.tasks, key=lambda t: t.id or 0)
            ],
        )


__all__ = ["TemplateRepository"]
