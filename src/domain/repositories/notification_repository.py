"""Notification sink protocol."""

from typing import Protocol

from domain.entities.notification import Notification


class INotificationSink(Protocol):
    """Outbound channel for notifications (the chat transport, or a queue it drains)."""

    def deliver(self, notification: Notification) -> None:
        """Hand a notification over for delivery."""
        ...

    def drain(self, recipient_id: str) -> list[Notification]:
        """Remove and return everything queued for a recipient."""
        ...
