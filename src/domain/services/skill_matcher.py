"""Complementary-skill teammate matching."""

from collections.abc import Iterable, Mapping
from uuid import UUID

from core.exceptions import SkillsRequiredError
from domain.entities.match import Match
from domain.entities.profile import Profile
from domain.entities.team import Team

COMPLEMENTARY_SKILL_POINTS = 2
VERIFIED_BONUS = 3


def score_candidate(complementary_skills: int, verified: bool) -> int:
    """Two points per complementary skill plus a bonus for verified candidates."""
    return COMPLEMENTARY_SKILL_POINTS * complementary_skills + (VERIFIED_BONUS if verified else 0)


def find_matches(
    requester: Profile,
    profiles: Iterable[Profile],
    teams: Mapping[UUID, Team],
) -> list[Match]:
    """Rank every eligible candidate for ``requester``, best first.

    Candidates in a full team, and candidates that would score zero, are
    left out. Equal scores keep the order of ``profiles``. The full ranking
    is returned; truncating it for display is up to the caller.

    Raises:
        SkillsRequiredError: If the requester has no skills recorded.
    """
    if not requester.skills:
        raise SkillsRequiredError(requester.id)

    own_skills = requester.skill_set
    matches: list[Match] = []

    for candidate in profiles:
        if candidate.id == requester.id:
            continue

        if candidate.team_id is not None:
            team = teams.get(candidate.team_id)
            if team is not None and team.is_full:
                continue

        complementary = [skill for skill in candidate.skills if skill not in own_skills]
        score = score_candidate(len(complementary), candidate.verified)
        if score == 0:
            continue

        matches.append(
            Match(candidate=candidate, complementary_skills=complementary, score=score)
        )

    # sorted() is stable, so ties keep enumeration order
    return sorted(matches, key=lambda match: match.score, reverse=True)
