"""Dependency injection factories for API v1."""

from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncEngine

from core.config import settings
from domain.services.notification_service import NotificationService
from domain.services.persistence_service import PersistenceService
from domain.services.profile_service import ProfileService
from domain.services.team_service import TeamService
from domain.services.verification_service import VerificationService
from infrastructure.database.repositories.sqlalchemy_snapshot_repo import (
    SQLAlchemySnapshotRepository,
)
from infrastructure.database.session import create_engine, create_session_factory
from infrastructure.notifications.outbox import InMemoryOutbox
from infrastructure.store.memory_store import InMemoryEntityStore
from infrastructure.verification.keyword_verifier import KeywordVerifier


@lru_cache
def get_entity_store() -> InMemoryEntityStore:
    """Get the process-wide entity store."""
    return InMemoryEntityStore()


@lru_cache
def get_outbox() -> InMemoryOutbox:
    """Get the notification outbox."""
    return InMemoryOutbox()


@lru_cache
def get_notification_service() -> NotificationService:
    """Get Notification service instance."""
    return NotificationService(get_outbox())


@lru_cache
def get_team_service() -> TeamService:
    """Get Team service instance."""
    return TeamService(
        get_entity_store(),
        notification_service=get_notification_service(),
        max_members=settings.max_team_members,
    )


@lru_cache
def get_profile_service() -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(get_entity_store(), get_team_service())


@lru_cache
def get_verification_service() -> VerificationService:
    """Get Verification service instance."""
    return VerificationService(get_entity_store())


@lru_cache
def get_keyword_verifier() -> KeywordVerifier:
    """Get the screenshot keyword verifier."""
    return KeywordVerifier(
        settings.verification_keyword_list,
        min_keywords=settings.verification_min_keywords,
    )


@lru_cache
def get_engine() -> AsyncEngine:
    """Get the snapshot database engine."""
    return create_engine()


@lru_cache
def get_persistence_service() -> PersistenceService:
    """Get Persistence service instance."""
    return PersistenceService(
        get_entity_store(),
        SQLAlchemySnapshotRepository(create_session_factory(get_engine())),
        get_team_service(),
    )
