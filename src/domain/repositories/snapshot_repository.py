"""Snapshot repository protocol."""

from typing import Protocol

from domain.entities.snapshot import EntitySnapshot


class ISnapshotRepository(Protocol):
    """Durable storage for entity store snapshots."""

    async def load(self) -> EntitySnapshot:
        """Load the last saved snapshot (empty if nothing was saved)."""
        ...

    async def save(self, snapshot: EntitySnapshot) -> None:
        """Replace the stored snapshot."""
        ...

    async def ping(self) -> None:
        """Raise if the backing storage is unreachable."""
        ...
