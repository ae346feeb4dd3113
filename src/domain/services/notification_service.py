"""Notification service for team membership events."""

from typing import Any
from uuid import UUID

import structlog

from domain.entities.notification import Notification
from domain.repositories.notification_repository import INotificationSink

logger = structlog.get_logger()


class NotificationService:
    """Builds notifications and hands them to the outbound sink."""

    def __init__(self, sink: INotificationSink) -> None:
        self._sink = sink

    def notify(
        self,
        type_name: str,
        recipient_id: str,
        actor_id: str,
        team_id: UUID,
        metadata: dict[str, Any] | None = None,
    ) -> Notification | None:
        """Notify one member about an action taken by another.

        Returns:
            The delivered Notification, or None if skipped (self-notification)
            or if delivery failed.
        """
        if recipient_id == actor_id:
            return None

        notification = Notification(
            type_name=type_name,
            recipient_id=recipient_id,
            actor_id=actor_id,
            team_id=team_id,
            metadata=metadata or {},
        )

        # Delivery is best effort; membership changes never depend on it.
        try:
            self._sink.deliver(notification)
        except Exception:
            logger.exception(
                "notification_delivery_failed",
                type_name=type_name,
                recipient_id=recipient_id,
                team_id=str(team_id),
            )
            return None

        logger.debug(
            "notification_delivered",
            type_name=type_name,
            recipient_id=recipient_id,
            team_id=str(team_id),
        )
        return notification

    def pending_for(self, recipient_id: str) -> list[Notification]:
        """Drain the notifications queued for a recipient."""
        return self._sink.drain(recipient_id)
