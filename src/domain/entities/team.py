"""Team domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from core.exceptions import InvalidTeamNameError

MAX_TEAM_MEMBERS = 5


@dataclass
class Team:
    """A bounded group of profiles.

    ``skills`` and ``verified_count`` are derived from the members. Only
    ``TeamService`` and ``VerificationService`` write them.
    """

    name: str
    founder_id: str
    members: list[str]
    skills: list[str] = field(default_factory=list)
    verified_count: int = 0
    max_members: int = MAX_TEAM_MEMBERS
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        self.name = self.name.strip()
        if not self.name:
            raise InvalidTeamNameError()
        if not self.members:
            raise ValueError("A team needs at least one member")
        if len(set(self.members)) != len(self.members):
            raise ValueError("Team members must be unique")
        if self.founder_id not in self.members:
            raise ValueError("Team founder must be a member")

    @property
    def member_count(self) -> int:
        return len(self.members)

    @property
    def is_full(self) -> bool:
        return len(self.members) >= self.max_members

    def has_member(self, profile_id: str) -> bool:
        return profile_id in self.members


class LeaveOutcome(str, Enum):
    """What happened to the team when a member left."""

    LEFT = "left"
    FOUNDER_PROMOTED = "founder_promoted"
    DISBANDED = "disbanded"


@dataclass(frozen=True)
class LeaveResult:
    """Result of a member leaving a team."""

    team_id: UUID
    team_name: str
    outcome: LeaveOutcome
    founder_id: str | None = None


@dataclass(frozen=True)
class ExportRow:
    """One exported team member row."""

    name: str
    handle: str
    verified: bool
    skills: list[str]
