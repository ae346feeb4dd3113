"""In-memory implementation of the entity store."""

from copy import deepcopy
from uuid import UUID

from domain.entities.profile import Profile
from domain.entities.snapshot import EntitySnapshot
from domain.entities.team import Team


class InMemoryEntityStore:
    """Dict-backed IEntityStore; dicts keep insertion order."""

    def __init__(self, snapshot: EntitySnapshot | None = None) -> None:
        self._profiles: dict[str, Profile] = {}
        self._teams: dict[UUID, Team] = {}
        if snapshot is not None:
            self.restore(snapshot)

    def get_profile(self, id: str) -> Profile | None:
        """Get a profile by ID."""
        return self._profiles.get(id)

    def list_profiles(self) -> list[Profile]:
        """Get all profiles in registration order."""
        return list(self._profiles.values())

    def add_profile(self, profile: Profile) -> Profile:
        """Store a new profile."""
        if profile.id in self._profiles:
            raise ValueError(f"Profile {profile.id} already exists")
        self._profiles[profile.id] = profile
        return profile

    def get_team(self, id: UUID) -> Team | None:
        """Get a team by ID."""
        return self._teams.get(id)

    def list_teams(self) -> list[Team]:
        """Get all teams in creation order."""
        return list(self._teams.values())

    def add_team(self, team: Team) -> Team:
        """Store a new team."""
        if team.id in self._teams:
            raise ValueError(f"Team {team.id} already exists")
        self._teams[team.id] = team
        return team

    def delete_team(self, id: UUID) -> bool:
        """Delete a team and return success status."""
        return self._teams.pop(id, None) is not None

    def snapshot(self) -> EntitySnapshot:
        """Return a detached copy of the whole store."""
        return EntitySnapshot(
            profiles=deepcopy(list(self._profiles.values())),
            teams=deepcopy(list(self._teams.values())),
        )

    def restore(self, snapshot: EntitySnapshot) -> None:
        """Replace the store contents with a snapshot."""
        self._profiles = {profile.id: profile for profile in snapshot.profiles}
        self._teams = {team.id: team for team in snapshot.teams}
