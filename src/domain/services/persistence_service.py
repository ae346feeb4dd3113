"""Persistence service: loading and snapshotting the entity store."""

import structlog

from domain.repositories.entity_store import IEntityStore
from domain.repositories.snapshot_repository import ISnapshotRepository
from domain.services.team_service import TeamService

logger = structlog.get_logger()


class PersistenceService:
    """Moves the entity store to and from durable storage.

    Saving is best effort: the in-memory state stays authoritative and a
    failed save is only logged.
    """

    def __init__(
        self,
        store: IEntityStore,
        repository: ISnapshotRepository,
        team_service: TeamService,
    ) -> None:
        self._store = store
        self._repository = repository
        self._teams = team_service

    async def load(self) -> None:
        """Replace the store with the last saved snapshot."""
        snapshot = await self._repository.load()
        self._store.restore(snapshot)
        corrected = self._teams.reconcile()
        logger.info(
            "snapshot_loaded",
            profile_count=len(snapshot.profiles),
            team_count=len(snapshot.teams),
            teams_corrected=corrected,
        )

    async def ping(self) -> None:
        """Raise if the snapshot storage is unreachable."""
        await self._repository.ping()

    async def save(self) -> bool:
        """Write the current store contents. Never raises."""
        snapshot = self._store.snapshot()
        try:
            await self._repository.save(snapshot)
        except Exception:
            logger.exception(
                "snapshot_save_failed",
                profile_count=len(snapshot.profiles),
                team_count=len(snapshot.teams),
            )
            return False

        logger.debug(
            "snapshot_saved",
            profile_count=len(snapshot.profiles),
            team_count=len(snapshot.teams),
        )
        return True
