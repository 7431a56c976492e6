"""Persistence layer for teams and team membership."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from teamhub.domain.entities import Team, TeamMember
from teamhub.infrastructure.models import TeamMemberModel, TeamModel
from teamhub.utils import ensure_app_timezone


class TeamRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, team: Team) -> Team:
        model = TeamModel(
            uuid=team.uuid,
            name=team.name,
            description=team.description,
            created_by=team.created_by,
        )
        self.session.add(model)
        self.session.flush()
        return self._to_entity(model)

    def get(self, team_id: int) -> Team | None:
        model = self.session.get(TeamModel, team_id)
        return self._to_entity(model) if model else None

    def get_id_by_uuid(self, team_uuid: str) -> int | None:
        row = self.session.query(TeamModel.id).filter(TeamModel.uuid == team_uuid).first()
        return row[0] if row else None

    def list_member_ids(self, team_id: int) -> Sequence[int]:
        rows = (
            self.session.query(TeamMemberModel.user_id)
            .filter(TeamMemberModel.team_id == team_id)
            .order_by(TeamMemberModel.id.asc())
            .all()
        )
        return [user_id for (user_id,) in rows]

    def is_member(self, team_id: int, user_id: int) -> bool:
        return (
            self.session.query(TeamMemberModel.id)
            .filter(TeamMemberModel.team_id == team_id)
            .filter(TeamMemberModel.user_id == user_id)
            .first()
            is not None
        )

    def add_member(self, member: TeamMember) -> TeamMember:
        model = TeamMemberModel(
            team_id=member.team_id,
            user_id=member.user_id,
            role=member.role,
        )
        self.session.add(model)
        self.session.flush()
        return TeamMember(
            team_id=model.team_id,
            user_id=model.user_id,
            role=model.role,
            joined_at=ensure_app_timezone(model.joined_at),
        )

    @staticmethod
    def _to_entity(model: TeamModel) -> Team:
        return Team(
            id=model.id,
            uuid=model.uuid,
            name=model.name,
            description=model.description,
            created_by=model.created_by,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["TeamRepository"]
