"""Profile service: registration, skills and the profile view."""

from collections.abc import Iterable

import structlog

from core.exceptions import (
    AlreadyRegisteredError,
    UnknownSkillError,
    UnregisteredError,
)
from domain.entities.match import Match
from domain.entities.profile import Profile
from domain.entities.skill import SKILL_CATALOG, is_known_skill
from domain.entities.team import Team
from domain.repositories.entity_store import IEntityStore
from domain.services.skill_matcher import find_matches
from domain.services.team_service import TeamService

logger = structlog.get_logger()


class ProfileService:
    """Service layer for participant profiles."""

    def __init__(self, store: IEntityStore, team_service: TeamService) -> None:
        self._store = store
        self._teams = team_service

    def register(self, actor_id: str, handle: str, display_name: str = "") -> Profile:
        """Register a new participant with no skills and no team."""
        if self._store.get_profile(actor_id):
            raise AlreadyRegisteredError(actor_id)

        profile = Profile(id=actor_id, handle=handle, display_name=display_name.strip())
        self._store.add_profile(profile)

        logger.info("profile_registered", profile_id=actor_id)
        return profile

    def get(self, actor_id: str) -> Profile:
        """Get the actor's profile."""
        profile = self._store.get_profile(actor_id)
        if not profile:
            raise UnregisteredError(actor_id)
        return profile

    def get_team(self, profile: Profile) -> Team | None:
        """Get the profile's team, if any."""
        if profile.team_id is None:
            return None
        return self._store.get_team(profile.team_id)

    def skill_toggles(self, actor_id: str) -> list[tuple[str, bool]]:
        """The skill catalog with the actor's current selection."""
        profile = self.get(actor_id)
        return [(skill, profile.has_skill(skill)) for skill in SKILL_CATALOG]

    def toggle_skill(self, actor_id: str, skill: str) -> bool:
        """Add the skill if absent, remove it if present.

        Returns:
            Whether the skill is selected afterwards.
        """
        profile = self.get(actor_id)
        if not is_known_skill(skill):
            raise UnknownSkillError(skill)

        if profile.has_skill(skill):
            profile.skills.remove(skill)
            selected = False
        else:
            profile.skills.append(skill)
            selected = True

        self._teams.refresh_skills(profile)
        logger.info("skill_toggled", profile_id=actor_id, skill=skill, selected=selected)
        return selected

    def set_skills(self, actor_id: str, skills: Iterable[str]) -> Profile:
        """Replace the actor's skills."""
        profile = self.get(actor_id)
        new_skills = list(dict.fromkeys(skills))
        for skill in new_skills:
            if not is_known_skill(skill):
                raise UnknownSkillError(skill)

        profile.skills = new_skills
        self._teams.refresh_skills(profile)
        logger.info("skills_updated", profile_id=actor_id, skill_count=len(new_skills))
        return profile

    def find_teammates(self, actor_id: str) -> list[Match]:
        """All eligible teammates for the actor, best first."""
        profile = self.get(actor_id)
        teams = {team.id: team for team in self._store.list_teams()}
        return find_matches(profile, self._store.list_profiles(), teams)
