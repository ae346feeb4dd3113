"""Team lifecycle: create, join, leave and the derived team aggregates."""

from collections.abc import Iterable
from uuid import UUID

import structlog

from core.exceptions import (
    AlreadyInTeamError,
    NotInTeamError,
    NotTeamFounderError,
    TeamFullError,
    TeamNotFoundError,
    UnregisteredError,
)
from domain.entities.notification import NotificationTypes
from domain.entities.profile import Profile
from domain.entities.team import (
    MAX_TEAM_MEMBERS,
    ExportRow,
    LeaveOutcome,
    LeaveResult,
    Team,
)
from domain.repositories.entity_store import IEntityStore
from domain.services.notification_service import NotificationService

logger = structlog.get_logger()


def union_skills(profiles: Iterable[Profile]) -> list[str]:
    """Union of the profiles' skills, in first-seen order."""
    skills: dict[str, None] = {}
    for profile in profiles:
        skills.update(dict.fromkeys(profile.skills))
    return list(skills)


class TeamService:
    """Owns every write to team membership and to the derived team fields.

    Skills are unioned in additively on join but rebuilt from the remaining
    members on leave, since a leaver may have been the only one with a skill.
    Every operation checks all of its preconditions before touching state.
    """

    def __init__(
        self,
        store: IEntityStore,
        notification_service: NotificationService | None = None,
        max_members: int = MAX_TEAM_MEMBERS,
    ) -> None:
        self._store = store
        self._notification = notification_service
        self._max_members = max_members

    # --- Queries ---

    def get(self, team_id: UUID) -> Team:
        """Get a team by ID."""
        team = self._store.get_team(team_id)
        if not team:
            raise TeamNotFoundError(str(team_id))
        return team

    def list_teams(self) -> list[Team]:
        """Get all teams in creation order."""
        return self._store.list_teams()

    def get_for_member(self, actor_id: str) -> Team:
        """Get the team the actor belongs to."""
        profile = self._require_profile(actor_id)
        if profile.team_id is None:
            raise NotInTeamError(actor_id)
        return self.get(profile.team_id)

    def get_members(self, team: Team) -> list[Profile]:
        """Get the member profiles of a team in join order."""
        members = []
        for member_id in team.members:
            profile = self._store.get_profile(member_id)
            if profile is not None:
                members.append(profile)
        return members

    def export_rows(self, actor_id: str) -> list[ExportRow]:
        """Tabular member data of the actor's team. Founder only."""
        team = self.get_for_member(actor_id)
        if team.founder_id != actor_id:
            raise NotTeamFounderError(str(team.id))

        return [
            ExportRow(
                name=member.display_name,
                handle=member.handle,
                verified=member.verified,
                skills=list(member.skills),
            )
            for member in self.get_members(team)
        ]

    # --- Lifecycle ---

    def create(self, actor_id: str, name: str) -> Team:
        """Create a team with the actor as founder and sole member."""
        profile = self._require_profile(actor_id)
        self._require_no_team(profile)

        team = Team(
            name=name,
            founder_id=profile.id,
            members=[profile.id],
            skills=list(profile.skills),
            verified_count=1 if profile.verified else 0,
            max_members=self._max_members,
        )
        self._store.add_team(team)
        profile.team_id = team.id

        logger.info("team_created", team_id=str(team.id), founder_id=profile.id)
        return team

    def join(self, actor_id: str, team_id: UUID) -> Team:
        """Add the actor to an existing team and notify its founder."""
        profile = self._require_profile(actor_id)
        self._require_no_team(profile)

        team = self.get(team_id)
        if team.is_full:
            raise TeamFullError(str(team.id), team.name, team.max_members)

        team.members.append(profile.id)
        for skill in profile.skills:
            if skill not in team.skills:
                team.skills.append(skill)
        if profile.verified:
            team.verified_count += 1
        profile.team_id = team.id

        logger.info(
            "member_joined",
            team_id=str(team.id),
            profile_id=profile.id,
            member_count=team.member_count,
        )

        if profile.id != team.founder_id:
            self._notify(
                NotificationTypes.MEMBER_JOINED,
                recipient_id=team.founder_id,
                actor=profile,
                team=team,
            )
        return team

    def leave(self, actor_id: str) -> LeaveResult:
        """Remove the actor from their team.

        The last member leaving disbands the team. A departing founder hands
        over to the earliest remaining member.
        """
        profile = self._require_profile(actor_id)
        if profile.team_id is None:
            raise NotInTeamError(actor_id)
        team = self.get(profile.team_id)

        team.members.remove(profile.id)
        if profile.verified:
            team.verified_count = max(0, team.verified_count - 1)
        team.skills = union_skills(self.get_members(team))
        profile.team_id = None

        if not team.members:
            self._store.delete_team(team.id)
            logger.info("team_disbanded", team_id=str(team.id), profile_id=profile.id)
            return LeaveResult(
                team_id=team.id,
                team_name=team.name,
                outcome=LeaveOutcome.DISBANDED,
            )

        if team.founder_id == profile.id:
            team.founder_id = team.members[0]
            outcome = LeaveOutcome.FOUNDER_PROMOTED
            self._notify(
                NotificationTypes.FOUNDER_PROMOTED,
                recipient_id=team.founder_id,
                actor=profile,
                team=team,
            )
        else:
            outcome = LeaveOutcome.LEFT
            self._notify(
                NotificationTypes.MEMBER_LEFT,
                recipient_id=team.founder_id,
                actor=profile,
                team=team,
            )

        logger.info(
            "member_left",
            team_id=str(team.id),
            profile_id=profile.id,
            founder_id=team.founder_id,
            outcome=outcome.value,
        )
        return LeaveResult(
            team_id=team.id,
            team_name=team.name,
            outcome=outcome,
            founder_id=team.founder_id,
        )

    def refresh_skills(self, profile: Profile) -> None:
        """Rebuild the skills of the profile's team after a skill edit."""
        if profile.team_id is None:
            return
        team = self._store.get_team(profile.team_id)
        if team is not None:
            team.skills = union_skills(self.get_members(team))

    def reconcile(self) -> int:
        """Repair references and derived fields after loading a snapshot.

        Drops members that no longer exist, clears profile references to
        teams that do not list them, deletes empty teams and recomputes
        ``skills`` and ``verified_count`` from scratch.

        Returns:
            The number of teams that had to be corrected or removed.
        """
        corrected = 0

        for team in self._store.list_teams():
            profiles = [
                p
                for p in self.get_members(team)
                if p.team_id == team.id
            ]
            members = [p.id for p in profiles]
            skills = union_skills(profiles)
            verified_count = sum(1 for p in profiles if p.verified)

            if not members:
                self._store.delete_team(team.id)
                corrected += 1
                logger.warning("empty_team_removed", team_id=str(team.id))
                continue

            founder_id = team.founder_id if team.founder_id in members else members[0]
            if (
                members != team.members
                or skills != team.skills
                or verified_count != team.verified_count
                or founder_id != team.founder_id
            ):
                corrected += 1
                logger.warning(
                    "team_aggregates_corrected",
                    team_id=str(team.id),
                    verified_count_was=team.verified_count,
                    verified_count=verified_count,
                )
                team.members = members
                team.skills = skills
                team.verified_count = verified_count
                team.founder_id = founder_id

        for profile in self._store.list_profiles():
            if profile.team_id is None:
                continue
            team = self._store.get_team(profile.team_id)
            if team is None or not team.has_member(profile.id):
                logger.warning(
                    "dangling_team_reference_cleared",
                    profile_id=profile.id,
                    team_id=str(profile.team_id),
                )
                profile.team_id = None

        return corrected

    # --- Internal helpers ---

    def _require_profile(self, actor_id: str) -> Profile:
        profile = self._store.get_profile(actor_id)
        if not profile:
            raise UnregisteredError(actor_id)
        return profile

    def _require_no_team(self, profile: Profile) -> None:
        if profile.team_id is None:
            return
        current = self._store.get_team(profile.team_id)
        raise AlreadyInTeamError(
            str(profile.team_id), current.name if current else str(profile.team_id)
        )

    def _notify(
        self,
        type_name: str,
        recipient_id: str,
        actor: Profile,
        team: Team,
    ) -> None:
        if not self._notification:
            return
        self._notification.notify(
            type_name=type_name,
            recipient_id=recipient_id,
            actor_id=actor.id,
            team_id=team.id,
            metadata={
                "actor_name": actor.display_name or actor.handle,
                "actor_handle": actor.handle,
                "verified_mark": " ✅" if actor.verified else "",
                "team_name": team.name,
            },
        )
