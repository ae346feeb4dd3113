"""Pydantic schemas for Match API."""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field


class MatchResponse(BaseModel):
    """Schema for one ranked teammate."""

    profile_id: str
    handle: str
    display_name: str
    verified: bool
    score: int
    complementary_skills: list[str]
    team_id: UUID | None = None
    team_name: str | None = None


class MatchListResponse(BaseModel):
    """Schema for ranked teammates."""

    data: list[MatchResponse]
    meta: dict[str, Any] = Field(default_factory=dict)
