"""SQLAlchemy models for templates and their nested definitions."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from teamhub.infrastructure.database import Base
from teamhub.utils import now_in_app_naive_datetime


class TemplateModel(Base):
    """Database representation of a template definition."""

    __tablename__ = "templates"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    created_by = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )

    projects = relationship(
        "TemplateProjectModel",
        back_populates="template",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="TemplateProjectModel.id",
    )


class TemplateProjectModel(Base):
    """Project definition row nested inside a template."""

    __tablename__ = "template_projects"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    template_id = Column(
        Integer,
        ForeignKey("templates.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    project_name_template = Column(String(255), nullable=False)
    project_description_template = Column(Text, nullable=True)
    start_day = Column(Integer, nullable=True, default=0)
    duration_days = Column(Integer, nullable=True, default=1)

    template = relationship("TemplateModel", back_populates="projects")
    tasks = relationship(
        "TemplateTaskModel",
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="TemplateTaskModel.id",
    )


class TemplateTaskModel(Base):
    """Task definition row nested inside a template project definition."""

    __tablename__ = "template_tasks"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    template_project_id = Column(
        Integer,
        ForeignKey("template_projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    task_name_template = Column(String(255), nullable=False)
    task_description_template = Column(Text, nullable=True)
    start_day = Column(Integer, nullable=True, default=0)
    duration_days = Column(Integer, nullable=True, default=1)

    project = relationship("TemplateProjectModel", back_populates="tasks")


__all__ = ["TemplateModel", "TemplateProjectModel", "TemplateTaskModel"]
