"""SQLAlchemy ORM models."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import JSON, Boolean, CheckConstraint, DateTime, Integer, String, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from domain.entities.profile import MAX_PROFILE_ID_LENGTH


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class ProfileModel(Base):
    """Participant profile snapshot row."""

    __tablename__ = "profiles"

    id: Mapped[str] = mapped_column(String(MAX_PROFILE_ID_LENGTH), primary_key=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    handle: Mapped[str] = mapped_column(String(100), nullable=False)
    display_name: Mapped[str] = mapped_column(String(200), nullable=False, default="")
    skills: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    team_id: Mapped[UUID | None] = mapped_column(Uuid, nullable=True)
    verified: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    verification_tags: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)


class TeamModel(Base):
    """Team snapshot row."""

    __tablename__ = "teams"
    __table_args__ = (
        CheckConstraint("verified_count >= 0", name="check_team_verified_count"),
        CheckConstraint("max_members >= 1", name="check_team_max_members"),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    position: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    founder_id: Mapped[str] = mapped_column(String(MAX_PROFILE_ID_LENGTH), nullable=False)
    members: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    skills: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    verified_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    max_members: Mapped[int] = mapped_column(Integer, nullable=False, default=5)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
