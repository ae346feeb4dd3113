"""Match domain entity."""

from dataclasses import dataclass

from domain.entities.profile import Profile


@dataclass(frozen=True)
class Match:
    """A candidate teammate ranked for a requester."""

    candidate: Profile
    complementary_skills: list[str]
    score: int
