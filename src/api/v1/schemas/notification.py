"""Pydantic schemas for Notification API."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class NotificationResponse(BaseModel):
    """Schema for Notification response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    type: str
    team_id: UUID
    actor_id: str
    message: str
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime


class NotificationListResponse(BaseModel):
    """Schema for list of Notifications response."""

    data: list[NotificationResponse]
    meta: dict[str, Any] = Field(default_factory=dict)
