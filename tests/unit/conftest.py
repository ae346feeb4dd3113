"""Shared fixtures for unit tests."""

from typing import Any

import pytest

from domain.entities.profile import Profile
from domain.entities.snapshot import EntitySnapshot
from domain.entities.team import Team
from domain.services.notification_service import NotificationService
from domain.services.profile_service import ProfileService
from domain.services.team_service import TeamService
from domain.services.verification_service import VerificationService
from infrastructure.notifications.outbox import InMemoryOutbox
from infrastructure.store.memory_store import InMemoryEntityStore


class FakeSnapshotRepository:
    """Fake snapshot repository recording saves for unit testing."""

    def __init__(self, snapshot: EntitySnapshot | None = None) -> None:
        self.stored = snapshot or EntitySnapshot()
        self.saves: list[EntitySnapshot] = []
        self.fail_with: Exception | None = None

    async def load(self) -> EntitySnapshot:
        return self.stored

    async def save(self, snapshot: EntitySnapshot) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        self.saves.append(snapshot)
        self.stored = snapshot

    async def ping(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with


def add_profile(
    store: InMemoryEntityStore,
    id: str,
    skills: list[str] | None = None,
    verified: bool = False,
    **kwargs: Any,
) -> Profile:
    """Register a profile directly in the store."""
    profile = Profile(
        id=id,
        handle=kwargs.pop("handle", f"user_{id}"),
        display_name=kwargs.pop("display_name", id.title()),
        skills=list(skills or []),
        verified=verified,
        **kwargs,
    )
    return store.add_profile(profile)


def assert_team_consistent(store: InMemoryEntityStore, team: Team) -> None:
    """Check the derived team fields against its members."""
    members = [store.get_profile(m) for m in team.members]
    assert all(m is not None for m in members)
    assert all(m.team_id == team.id for m in members)  # type: ignore[union-attr]
    expected_skills = {s for m in members for s in m.skills}  # type: ignore[union-attr]
    assert set(team.skills) == expected_skills
    assert len(team.skills) == len(expected_skills)
    assert team.verified_count == sum(1 for m in members if m.verified)  # type: ignore[union-attr]
    assert team.founder_id in team.members


@pytest.fixture
def store() -> InMemoryEntityStore:
    """Create a fresh in-memory entity store."""
    return InMemoryEntityStore()


@pytest.fixture
def outbox() -> InMemoryOutbox:
    return InMemoryOutbox()


@pytest.fixture
def notification_service(outbox: InMemoryOutbox) -> NotificationService:
    return NotificationService(outbox)


@pytest.fixture
def team_service(
    store: InMemoryEntityStore, notification_service: NotificationService
) -> TeamService:
    return TeamService(store, notification_service=notification_service)


@pytest.fixture
def profile_service(store: InMemoryEntityStore, team_service: TeamService) -> ProfileService:
    return ProfileService(store, team_service)


@pytest.fixture
def verification_service(store: InMemoryEntityStore) -> VerificationService:
    return VerificationService(store)
