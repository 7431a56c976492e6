"""ORM models used by the application infrastructure."""

from .notification import NotificationModel
from .project import ProjectModel
from .role import RoleModel
from .task import TaskModel
from .team import TeamMemberModel, TeamModel
from .template import TemplateModel, TemplateProjectModel, TemplateTaskModel
from .user import UserModel

__all__ = [
    "NotificationModel",
    "ProjectModel",
    "RoleModel",
    "TaskModel",
    "TeamMemberModel",
    "TeamModel",
    "TemplateModel",
    "TemplateProjectModel",
    "TemplateTaskModel",
    "UserModel",
]
