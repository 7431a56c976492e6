"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from teamhub.domain.entities import Notification
from teamhub.infrastructure.models import NotificationModel
from teamhub.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_naive_datetime,
)


class NotificationRepository:
    """Provide create and list operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(
        self,
        user_id: int,
        *,
        limit: int | None = 50,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel)
        query = query.filter(NotificationModel.user_id == user_id)
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def add_many(self, notifications: Sequence[Notification]) -> list[Notification]:
        models: list[NotificationModel] = []
        for notification in notifications:
            model = NotificationModel(
                user_id=notification.user_id,
                event_type=notification.event_type,
                title=notification.title,
                message=notification.message,
                payload=notification.payload or {},
                created_at=ensure_app_naive_datetime(notification.created_at)
                or now_in_app_naive_datetime(),
                read_at=ensure_app_naive_datetime(notification.read_at),
            )
            self.session.add(model)
            models.append(model)
        self.session.flush()
        return [self._to_entity(model) for model in models]

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            event_type=model.event_type,
            title=model.title,
            message=model.message,
            payload=model.payload or {},
            created_at=ensure_app_timezone(model.created_at),
            read_at=ensure_app_timezone(model.read_at),
        )


__all__ = ["NotificationRepository"]
