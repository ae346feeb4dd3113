"""Verification domain entities."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class VerificationOutcome:
    """Outcome reported by the screenshot verification collaborator."""

    matched: bool
    tags: list[str] = field(default_factory=list)
