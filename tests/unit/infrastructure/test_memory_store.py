"""Unit tests for the in-memory entity store and outbox."""

from uuid import uuid4

import pytest

from domain.entities.notification import Notification, NotificationTypes
from domain.entities.profile import Profile
from domain.entities.snapshot import EntitySnapshot
from domain.entities.team import Team
from infrastructure.notifications.outbox import InMemoryOutbox
from infrastructure.store.memory_store import InMemoryEntityStore


class TestInMemoryEntityStore:
    def test_keeps_registration_order(self, store: InMemoryEntityStore):
        for pid in ["c", "a", "b"]:
            store.add_profile(Profile(id=pid, handle=pid))

        assert [p.id for p in store.list_profiles()] == ["c", "a", "b"]

    def test_rejects_duplicate_profile(self, store: InMemoryEntityStore):
        store.add_profile(Profile(id="a", handle="ada"))

        with pytest.raises(ValueError):
            store.add_profile(Profile(id="a", handle="other"))

    def test_delete_team(self, store: InMemoryEntityStore):
        team = store.add_team(Team(name="Rocket", founder_id="a", members=["a"]))

        assert store.delete_team(team.id) is True
        assert store.delete_team(team.id) is False
        assert store.get_team(team.id) is None

    def test_snapshot_is_detached(self, store: InMemoryEntityStore):
        profile = store.add_profile(Profile(id="a", handle="ada", skills=["Apex"]))
        team = store.add_team(Team(name="Rocket", founder_id="a", members=["a"]))

        snapshot = store.snapshot()
        profile.skills.append("React")
        team.members.append("b")

        assert snapshot.profiles[0].skills == ["Apex"]
        assert snapshot.teams[0].members == ["a"]

    def test_restore_replaces_contents(self, store: InMemoryEntityStore):
        store.add_profile(Profile(id="old", handle="old"))

        store.restore(EntitySnapshot(profiles=[Profile(id="new", handle="new")]))

        assert store.get_profile("old") is None
        assert [p.id for p in store.list_profiles()] == ["new"]
        assert store.list_teams() == []


class TestInMemoryOutbox:
    def _notification(self, recipient_id: str) -> Notification:
        return Notification(
            type_name=NotificationTypes.MEMBER_LEFT,
            recipient_id=recipient_id,
            actor_id="x",
            team_id=uuid4(),
        )

    def test_drain_empties_queue(self):
        outbox = InMemoryOutbox()
        outbox.deliver(self._notification("a"))

        assert len(outbox.drain("a")) == 1
        assert outbox.pending_count("a") == 0

    def test_drops_oldest_on_overflow(self):
        outbox = InMemoryOutbox(max_per_recipient=2)
        first, second, third = (self._notification("a") for _ in range(3))
        for notification in (first, second, third):
            outbox.deliver(notification)

        assert outbox.drain("a") == [second, third]
