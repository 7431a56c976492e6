"""Domain entities exposed by the application."""

from .generation import GenerationParams, GenerationResult
from .import_result import ImportResult, RowError
from .notification import Notification
from .project import PROJECT_STATUS_PLANNING, PROJECT_STATUSES, Project
from .role import Role
from .task import (
    TASK_PRIORITIES,
    TASK_PRIORITY_MEDIUM,
    TASK_STATUS_TODO,
    TASK_STATUSES,
    Task,
)
from .team import TEAM_ROLE_MEMBER, Team, TeamMember
from .template import MAX_OFFSET_DAYS, ProjectDefinition, TaskDefinition, Template
from .user import User

__all__ = [
    "GenerationParams",
    "GenerationResult",
    "ImportResult",
    "MAX_OFFSET_DAYS",
    "Notification",
    "PROJECT_STATUSES",
    "PROJECT_STATUS_PLANNING",
    "Project",
    "ProjectDefinition",
    "Role",
    "RowError",
    "TASK_PRIORITIES",
    "TASK_PRIORITY_MEDIUM",
    "TASK_STATUSES",
    "TASK_STATUS_TODO",
    "TEAM_ROLE_MEMBER",
    "Task",
    "TaskDefinition",
    "Team",
    "TeamMember",
    "Template",
    "User",
]
