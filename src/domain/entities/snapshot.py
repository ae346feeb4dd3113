"""Entity snapshot handed to and from the persistence collaborator."""

from dataclasses import dataclass, field

from domain.entities.profile import Profile
from domain.entities.team import Team


@dataclass
class EntitySnapshot:
    """All profiles and teams, each in insertion order."""

    profiles: list[Profile] = field(default_factory=list)
    teams: list[Team] = field(default_factory=list)
