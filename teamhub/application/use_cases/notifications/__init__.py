"""Notification-related use cases."""

from .events import EVENT_PROJECT_ASSIGNED, notify_project_assigned

__all__ = ["EVENT_PROJECT_ASSIGNED", "notify_project_assigned"]
