"""Helpers that persist domain notifications for application events."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from teamhub.domain.entities import Notification
from teamhub.domain.errors import NotificationSideEffectError
from teamhub.infrastructure.repositories import NotificationRepository
from teamhub.utils import now_in_app_timezone

EVENT_PROJECT_ASSIGNED = "project_assigned"


def _persist_notifications(
    session: Session,
    *,
    user_ids: Iterable[int],
    event_type: str,
    title: str,
    message: str,
    payload: dict | None = None,
) -> list[Notification]:
    now = now_in_app_timezone()
    notifications = [
        Notification(
            id=None,
            user_id=user_id,
            event_type=event_type,
            title=title,
            message=message,
            payload=dict(payload or {}),
            created_at=now,
            read_at=None,
        )
        for user_id in user_ids
    ]
    if not notifications:
        return []
    return NotificationRepository(session).add_many(notifications)


def notify_project_assigned(
    session: Session,
    *,
    assigner_id: int | None,
    team_member_ids: Iterable[int],
    project_id: int,
    project_name: str,
) -> list[Notification]:
    """Tell every team member that ``project_name`` was assigned to their team.

    Notifications are committed here because callers run this after their own
    transaction has finished.
    """

    recipients = list(dict.fromkeys(member_id for member_id in team_member_ids if member_id))
    try:
        saved = _persist_notifications(
            session,
            user_ids=recipients,
            event_type=EVENT_PROJECT_ASSIGNED,
            title="New project",
            message=f'Your team was assigned the project "{project_name}"',
            payload={
                "project_id": project_id,
                "sender_id": assigner_id,
                "action_url": f"/projects/{project_id}",
            },
        )
        if saved:
            session.commit()
    except SQLAlchemyError as exc:
        raise NotificationSideEffectError(
            f"Could not notify the team about project {project_id}"
        ) from exc
    return saved


__all__ = ["EVENT_PROJECT_ASSIGNED", "notify_project_assigned"]
