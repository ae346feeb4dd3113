"""Pydantic schemas for Team API."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class TeamCreate(BaseModel):
    """Schema for creating a team."""

    name: str = Field(..., max_length=100)


class TeamMemberResponse(BaseModel):
    """Schema for a team member entry."""

    id: str
    handle: str
    display_name: str
    verified: bool
    is_founder: bool = False


class TeamResponse(BaseModel):
    """Schema for Team response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    founder_id: str
    member_count: int
    max_members: int
    verified_count: int
    skills: list[str]
    created_at: datetime


class TeamDetail(TeamResponse):
    """Team response including its members."""

    members: list[TeamMemberResponse] = Field(default_factory=list)


class TeamListResponse(BaseModel):
    """Schema for list of Teams response."""

    data: list[TeamResponse]
    meta: dict[str, Any] = Field(default_factory=dict)


class TeamDetailResponse(BaseModel):
    """Schema for single Team response."""

    data: TeamDetail


class LeaveTeamResponse(BaseModel):
    """Schema for leaving a team."""

    team_id: UUID
    team_name: str
    outcome: str
    founder_id: str | None = None
    message: str


class ExportRowResponse(BaseModel):
    """One exported member row."""

    name: str
    handle: str
    verified: bool
    skills: list[str]


class TeamExportResponse(BaseModel):
    """Schema for team export."""

    data: list[ExportRowResponse]
    meta: dict[str, Any] = Field(default_factory=dict)
