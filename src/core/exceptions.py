"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"

    # Authorization errors (403)
    UNREGISTERED = "UNREGISTERED"
    NOT_TEAM_FOUNDER = "NOT_TEAM_FOUNDER"

    # Not found errors (404)
    TEAM_NOT_FOUND = "TEAM_NOT_FOUND"
    SKILLS_NOT_FOUND = "SKILLS_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_HANDLE = "INVALID_HANDLE"
    INVALID_TEAM_NAME = "INVALID_TEAM_NAME"
    UNKNOWN_SKILL = "UNKNOWN_SKILL"
    NOT_IN_TEAM = "NOT_IN_TEAM"

    # Conflict errors (409)
    ALREADY_REGISTERED = "ALREADY_REGISTERED"
    ALREADY_IN_TEAM = "ALREADY_IN_TEAM"
    TEAM_FULL = "TEAM_FULL"
    VERIFICATION_NOT_PENDING = "VERIFICATION_NOT_PENDING"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """The transport did not identify the acting user."""

    def __init__(self, message: str = "X-Actor-Id header required") -> None:
        super().__init__(
            error_code=ErrorCode.UNAUTHORIZED,
            message=message,
            status_code=401,
        )


class NotFoundError(AppException):
    """Base class for missing team or skill data."""


class TeamNotFoundError(NotFoundError):
    """Team not found."""

    def __init__(self, team_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.TEAM_NOT_FOUND,
            message=f"Team with ID {team_id} not found",
            status_code=404,
            details={"team_id": team_id},
        )


class SkillsRequiredError(NotFoundError):
    """The requester has no skills recorded, so nothing can complement them."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.SKILLS_NOT_FOUND,
            message="Please add your skills first",
            status_code=404,
            details={"profile_id": profile_id},
        )


class UnregisteredError(AppException):
    """The actor has not registered a profile yet."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.UNREGISTERED,
            message="Please register first",
            status_code=403,
            details={"profile_id": profile_id},
        )


class AlreadyRegisteredError(AppException):
    """A profile already exists for this actor."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.ALREADY_REGISTERED,
            message="You are already registered",
            status_code=409,
            details={"profile_id": profile_id},
        )


class InvalidHandleError(AppException):
    """A handle is required to register."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_HANDLE,
            message="You need to set a username before registering",
            status_code=400,
        )


class InvalidTeamNameError(AppException):
    """Team names must not be empty."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_TEAM_NAME,
            message="Please specify a team name",
            status_code=400,
        )


class UnknownSkillError(AppException):
    """Skill is not part of the catalog."""

    def __init__(self, skill: str) -> None:
        super().__init__(
            error_code=ErrorCode.UNKNOWN_SKILL,
            message=f"Unknown skill: {skill}",
            status_code=400,
            details={"skill": skill},
        )


class AlreadyInTeamError(AppException):
    """Profile already belongs to a team."""

    def __init__(self, team_id: str, team_name: str) -> None:
        super().__init__(
            error_code=ErrorCode.ALREADY_IN_TEAM,
            message=f"You're already in a team ({team_name}). Leave it first.",
            status_code=409,
            details={"team_id": team_id},
        )


class NotInTeamError(AppException):
    """Profile does not belong to any team."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.NOT_IN_TEAM,
            message="You're not in a team yet",
            status_code=400,
            details={"profile_id": profile_id},
        )


class TeamFullError(AppException):
    """Team has reached its member limit."""

    def __init__(self, team_id: str, team_name: str, max_members: int) -> None:
        super().__init__(
            error_code=ErrorCode.TEAM_FULL,
            message=f'Team "{team_name}" is already full ({max_members}/{max_members} members)',
            status_code=409,
            details={"team_id": team_id, "max_members": max_members},
        )


class NotTeamFounderError(AppException):
    """Only the team founder may perform this action."""

    def __init__(self, team_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.NOT_TEAM_FOUNDER,
            message="Only the team founder can export team data",
            status_code=403,
            details={"team_id": team_id},
        )


class VerificationNotPendingError(AppException):
    """A verification result arrived for an actor with no pending request."""

    def __init__(self, profile_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.VERIFICATION_NOT_PENDING,
            message="No verification in progress. Start one first.",
            status_code=409,
            details={"profile_id": profile_id},
        )
