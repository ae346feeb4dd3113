"""Entity store protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile
from domain.entities.snapshot import EntitySnapshot
from domain.entities.team import Team


class IEntityStore(Protocol):
    """In-process store that owns every Profile and Team.

    Iteration order is insertion order for both collections.
    """

    def get_profile(self, id: str) -> Profile | None:
        """Get a profile by ID."""
        ...

    def list_profiles(self) -> list[Profile]:
        """Get all profiles in registration order."""
        ...

    def add_profile(self, profile: Profile) -> Profile:
        """Store a new profile."""
        ...

    def get_team(self, id: UUID) -> Team | None:
        """Get a team by ID."""
        ...

    def list_teams(self) -> list[Team]:
        """Get all teams in creation order."""
        ...

    def add_team(self, team: Team) -> Team:
        """Store a new team."""
        ...

    def delete_team(self, id: UUID) -> bool:
        """Delete a team and return success status."""
        ...

    def snapshot(self) -> EntitySnapshot:
        """Return a detached copy of the whole store."""
        ...

    def restore(self, snapshot: EntitySnapshot) -> None:
        """Replace the store contents with a snapshot."""
        ...
