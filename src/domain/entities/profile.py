"""Profile domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from core.exceptions import InvalidHandleError

# Width of the profile id columns in snapshot storage.
MAX_PROFILE_ID_LENGTH = 64


@dataclass
class Profile:
    """A registered participant.

    ``skills`` behaves as a set for scoring but keeps the order in which the
    skills were picked, for display.
    """

    id: str
    handle: str
    display_name: str = ""
    skills: list[str] = field(default_factory=list)
    team_id: UUID | None = None
    verified: bool = False
    verification_tags: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        self.handle = self.handle.strip().lstrip("@")
        if not self.handle:
            raise InvalidHandleError()
        # Drop duplicates while keeping the first occurrence.
        self.skills = list(dict.fromkeys(self.skills))
        self.verification_tags = list(dict.fromkeys(self.verification_tags))

    @property
    def skill_set(self) -> frozenset[str]:
        return frozenset(self.skills)

    @property
    def has_team(self) -> bool:
        return self.team_id is not None

    def has_skill(self, skill: str) -> bool:
        return skill in self.skills
