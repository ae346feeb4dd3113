"""Pydantic schemas for Profile and skill API."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ProfileCreate(BaseModel):
    """Schema for registering a profile."""

    handle: str = Field("", max_length=100)
    display_name: str = Field("", max_length=200)


class SkillToggleRequest(BaseModel):
    """Schema for toggling one skill."""

    skill: str = Field(..., min_length=1, max_length=100)


class SkillsUpdate(BaseModel):
    """Schema for replacing a profile's skills."""

    skills: list[str] = Field(default_factory=list)


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    handle: str
    display_name: str
    skills: list[str]
    team_id: UUID | None
    team_name: str | None = None
    verified: bool
    verification_tags: list[str]
    created_at: datetime


class ProfileDetailResponse(BaseModel):
    """Schema for single Profile response."""

    data: ProfileResponse


class SkillToggleState(BaseModel):
    """One catalog skill with the actor's selection."""

    name: str
    selected: bool


class SkillCatalogResponse(BaseModel):
    """Schema for the skill catalog with toggle state."""

    data: list[SkillToggleState]
    meta: dict[str, Any] = Field(default_factory=dict)


class SkillToggleResponse(BaseModel):
    """Schema for the result of toggling one skill."""

    skill: str
    selected: bool
    data: list[SkillToggleState]
