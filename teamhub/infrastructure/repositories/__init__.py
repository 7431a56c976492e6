"""Repository implementations for infrastructure layer."""

from .notification_repository import NotificationRepository
from .project_repository import ProjectRepository
from .task_repository import TaskRepository
from .team_repository import TeamRepository
from .template_repository import TemplateRepository
from .user_repository import UserRepository

__all__ = [
    "NotificationRepository",
    "ProjectRepository",
    "TaskRepository",
    "TeamRepository",
    "TemplateRepository",
    "UserRepository",
]
