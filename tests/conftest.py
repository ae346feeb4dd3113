"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from pathlib import Path
from typing import Any

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain.services.notification_service import NotificationService
from domain.services.persistence_service import PersistenceService
from domain.services.profile_service import ProfileService
from domain.services.team_service import TeamService
from domain.services.verification_service import VerificationService
from infrastructure.database.models import Base
from infrastructure.database.repositories.sqlalchemy_snapshot_repo import (
    SQLAlchemySnapshotRepository,
)
from infrastructure.notifications.outbox import InMemoryOutbox
from infrastructure.store.memory_store import InMemoryEntityStore
from infrastructure.verification.keyword_verifier import KeywordVerifier

# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_KEYWORDS = ["Congratulations", "TDX Bengaluru", "Agentblazer", "Agentforce"]


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a test database engine with the snapshot tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def snapshot_repo(
    session_factory: async_sessionmaker[AsyncSession],
) -> SQLAlchemySnapshotRepository:
    return SQLAlchemySnapshotRepository(session_factory)


class Services:
    """Everything the API needs, wired against one fresh store."""

    def __init__(self, snapshot_repo: SQLAlchemySnapshotRepository) -> None:
        self.store = InMemoryEntityStore()
        self.outbox = InMemoryOutbox()
        self.notifications = NotificationService(self.outbox)
        self.teams = TeamService(self.store, notification_service=self.notifications)
        self.profiles = ProfileService(self.store, self.teams)
        self.verification = VerificationService(self.store)
        self.verifier = KeywordVerifier(TEST_KEYWORDS, min_keywords=2)
        self.persistence = PersistenceService(self.store, snapshot_repo, self.teams)


@pytest.fixture
def services(snapshot_repo: SQLAlchemySnapshotRepository) -> Services:
    return Services(snapshot_repo)


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client with no overrides."""
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def api_client(services: Services) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client whose services share one fresh in-memory store.

    Snapshots go to an in-memory SQLite database.
    """
    from api.v1.dependencies import (
        get_entity_store,
        get_keyword_verifier,
        get_notification_service,
        get_persistence_service,
        get_profile_service,
        get_team_service,
        get_verification_service,
    )
    from main import create_app

    app = create_app()

    overrides: dict[Any, Any] = {
        get_entity_store: lambda: services.store,
        get_notification_service: lambda: services.notifications,
        get_team_service: lambda: services.teams,
        get_profile_service: lambda: services.profiles,
        get_verification_service: lambda: services.verification,
        get_keyword_verifier: lambda: services.verifier,
        get_persistence_service: lambda: services.persistence,
    }
    app.dependency_overrides.update(overrides)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


def actor(actor_id: str) -> dict[str, str]:
    """Headers identifying the acting user."""
    return {"X-Actor-Id": actor_id}


async def register(
    client: AsyncClient, actor_id: str, skills: list[str] | None = None
) -> dict[str, Any]:
    """Register ``actor_id`` through the API and optionally pick skills."""
    response = await client.post(
        "/api/v1/profiles",
        json={"handle": f"user_{actor_id}", "display_name": f"User {actor_id}"},
        headers=actor(actor_id),
    )
    assert response.status_code == 201
    if skills:
        response = await client.put(
            "/api/v1/profiles/me/skills", json={"skills": skills}, headers=actor(actor_id)
        )
        assert response.status_code == 200
    return response.json()["data"]
