"""Notification domain entities and type constants."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID, uuid4

# --- Notification Type Constants ---
# Format: {entity_type}.{action}


class NotificationTypes:
    """Notification type constants using dot-notation."""

    MEMBER_JOINED = "team.member_joined"
    MEMBER_LEFT = "team.member_left"
    FOUNDER_PROMOTED = "team.founder_promoted"


_TEMPLATES: dict[str, str] = {
    NotificationTypes.MEMBER_JOINED: (
        '{actor_name} (@{actor_handle}){verified_mark} has joined your team "{team_name}"!'
    ),
    NotificationTypes.MEMBER_LEFT: '{actor_name} has left your team "{team_name}".',
    NotificationTypes.FOUNDER_PROMOTED: (
        '{actor_name} has left the team "{team_name}" and you are now the team founder!'
    ),
}


@dataclass
class Notification:
    """A message for one team member about something another member did."""

    type_name: str
    recipient_id: str
    actor_id: str
    team_id: UUID
    metadata: dict[str, Any] = field(default_factory=dict)
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def message(self) -> str:
        """Render the human-readable text for the transport."""
        template = _TEMPLATES.get(self.type_name)
        if template is None:
            return self.type_name
        values = {
            "actor_name": "",
            "actor_handle": "",
            "verified_mark": "",
            "team_name": "",
            **self.metadata,
        }
        return template.format(**values)
