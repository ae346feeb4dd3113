"""SQLAlchemy implementation of the snapshot repository."""

import structlog
from sqlalchemy import delete, select, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.exceptions import AppException
from domain.entities.profile import Profile
from domain.entities.snapshot import EntitySnapshot
from domain.entities.team import Team
from infrastructure.database.models import ProfileModel, TeamModel

logger = structlog.get_logger()


class SQLAlchemySnapshotRepository:
    """SQLAlchemy implementation of ISnapshotRepository.

    Each save replaces both tables inside a single transaction, so a failed
    save leaves the previous snapshot intact.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def load(self) -> EntitySnapshot:
        """Load the last saved snapshot.

        Rows that no longer form a valid entity are repaired when possible
        and skipped otherwise. Dangling references left behind are cleared
        by ``TeamService.reconcile`` after the store is restored.
        """
        async with self._session_factory() as session:
            profile_rows = await session.execute(
                select(ProfileModel).order_by(ProfileModel.position)
            )
            team_rows = await session.execute(select(TeamModel).order_by(TeamModel.position))

            profiles = []
            for profile_model in profile_rows.scalars():
                try:
                    profiles.append(self._profile_to_entity(profile_model))
                except (ValueError, AppException) as e:
                    logger.warning(
                        "snapshot_profile_skipped", profile_id=profile_model.id, error=str(e)
                    )

            teams = []
            for team_model in team_rows.scalars():
                try:
                    teams.append(self._team_to_entity(team_model))
                except (ValueError, AppException) as e:
                    logger.warning(
                        "snapshot_team_skipped", team_id=str(team_model.id), error=str(e)
                    )

            return EntitySnapshot(profiles=profiles, teams=teams)

    async def save(self, snapshot: EntitySnapshot) -> None:
        """Replace the stored snapshot."""
        async with self._session_factory() as session:
            async with session.begin():
                await session.execute(delete(ProfileModel))
                await session.execute(delete(TeamModel))
                session.add_all(
                    self._profile_to_model(profile, position)
                    for position, profile in enumerate(snapshot.profiles)
                )
                session.add_all(
                    self._team_to_model(team, position)
                    for position, team in enumerate(snapshot.teams)
                )

    async def ping(self) -> None:
        """Raise if the database is unreachable."""
        async with self._session_factory() as session:
            await session.execute(text("SELECT 1"))

    def _profile_to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            handle=model.handle,
            display_name=model.display_name,
            skills=list(model.skills or []),
            team_id=model.team_id,
            verified=model.verified,
            verification_tags=list(model.verification_tags or []),
            created_at=model.created_at,
        )

    def _profile_to_model(self, entity: Profile, position: int) -> ProfileModel:
        """Convert domain entity to ORM model."""
        return ProfileModel(
            id=entity.id,
            position=position,
            handle=entity.handle,
            display_name=entity.display_name,
            skills=list(entity.skills),
            team_id=entity.team_id,
            verified=entity.verified,
            verification_tags=list(entity.verification_tags),
            created_at=entity.created_at,
        )

    def _team_to_entity(self, model: TeamModel) -> Team:
        """Convert ORM model to domain entity.

        Duplicate members are dropped and a founder who is no longer a member
        is replaced by the earliest member, so the row still loads.
        """
        members = list(dict.fromkeys(model.members or []))
        founder_id = model.founder_id
        if members and founder_id not in members:
            logger.warning(
                "snapshot_team_founder_replaced",
                team_id=str(model.id),
                founder_was=founder_id,
                founder_id=members[0],
            )
            founder_id = members[0]
        return Team(
            id=model.id,
            name=model.name,
            founder_id=founder_id,
            members=members,
            skills=list(model.skills or []),
            verified_count=max(0, model.verified_count),
            max_members=model.max_members,
            created_at=model.created_at,
        )

    def _team_to_model(self, entity: Team, position: int) -> TeamModel:
        """Convert domain entity to ORM model."""
        return TeamModel(
            id=entity.id,
            position=position,
            name=entity.name,
            founder_id=entity.founder_id,
            members=list(entity.members),
            skills=list(entity.skills),
            verified_count=entity.verified_count,
            max_members=entity.max_members,
            created_at=entity.created_at,
        )
