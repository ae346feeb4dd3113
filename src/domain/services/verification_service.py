"""Verification service: pending requests and applying verification outcomes."""

from collections.abc import Iterable

import structlog

from core.exceptions import UnregisteredError, VerificationNotPendingError
from domain.entities.profile import Profile
from domain.entities.verification import VerificationOutcome
from domain.repositories.entity_store import IEntityStore

logger = structlog.get_logger()


class VerificationService:
    """Tracks pending screenshot checks and applies their outcome to profiles."""

    def __init__(self, store: IEntityStore) -> None:
        self._store = store
        self._pending: set[str] = set()

    def start(self, actor_id: str) -> None:
        """Mark the actor as waiting for a screenshot check."""
        self._require_profile(actor_id)
        self._pending.add(actor_id)
        logger.info("verification_started", profile_id=actor_id)

    def is_pending(self, actor_id: str) -> bool:
        return actor_id in self._pending

    def complete(self, actor_id: str, outcome: VerificationOutcome) -> Profile:
        """Apply a collaborator's outcome once the check finishes.

        The actor state is looked up again here because it may have changed
        while the image was being processed. The pending mark is cleared
        whether or not the check matched.
        """
        profile = self._require_profile(actor_id)
        if actor_id not in self._pending:
            raise VerificationNotPendingError(actor_id)
        self._pending.discard(actor_id)

        if outcome.matched:
            self.apply(profile, outcome.tags)
        else:
            logger.info("verification_unsuccessful", profile_id=actor_id)
        return profile

    def apply(self, profile: Profile, tags: Iterable[str]) -> None:
        """Mark the profile verified and record the matched tags.

        Tags from an earlier verification are replaced. The team's
        ``verified_count`` only moves on the unverified -> verified transition.
        """
        was_verified = profile.verified
        profile.verified = True
        profile.verification_tags = list(dict.fromkeys(tags))

        if was_verified:
            logger.info("verification_tags_updated", profile_id=profile.id)
            return

        if profile.team_id is not None:
            team = self._store.get_team(profile.team_id)
            if team is not None:
                team.verified_count += 1

        logger.info(
            "profile_verified",
            profile_id=profile.id,
            team_id=str(profile.team_id) if profile.team_id else None,
        )

    def _require_profile(self, actor_id: str) -> Profile:
        profile = self._store.get_profile(actor_id)
        if not profile:
            raise UnregisteredError(actor_id)
        return profile
