"""Pydantic schemas for Verification API."""

from pydantic import BaseModel, Field


class VerificationSubmission(BaseModel):
    """Text extracted from the registration confirmation screenshot."""

    text: str = Field(..., max_length=20000)


class VerificationResponse(BaseModel):
    """Schema for verification status."""

    pending: bool
    matched: bool | None = None
    verified: bool
    tags: list[str] = Field(default_factory=list)
    message: str
