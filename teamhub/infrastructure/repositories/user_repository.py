"""Persistence layer for users and roles."""

from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from teamhub.domain.entities import Role, User
from teamhub.infrastructure.models import RoleModel, UserModel
from teamhub.utils import ensure_app_timezone


class UserRepository:
    """Provide lookups and creation for user entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = (
            self.session.query(UserModel)
            .options(joinedload(UserModel.role))
            .filter(UserModel.id == user_id)
            .first()
        )
        return self._to_entity(model) if model else None

    def get_by_email(self, email: str) -> User | None:
        model = (
            self.session.query(UserModel)
            .options(joinedload(UserModel.role))
            .filter(func.lower(UserModel.email) == email.strip().lower())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        role = self.get_or_create_role(user.role.alias, name=user.role.name)
        model = UserModel(
            role_id=role.id,
            name=user.name,
            email=user.email,
            is_active=user.is_active,
        )
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def get_or_create_role(self, alias: str, *, name: str | None = None) -> Role:
        model = self.session.query(RoleModel).filter_by(alias=alias).first()
        if model is None:
            model = RoleModel(alias=alias, name=name or alias.title())
            self.session.add(model)
            self.session.flush()
        return Role(id=model.id, name=model.name, alias=model.alias)

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            role=Role(id=model.role.id, name=model.role.name, alias=model.role.alias),
            name=model.name,
            email=model.email,
            is_active=model.is_active,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["UserRepository"]
