"""In-memory notification outbox drained by the chat transport."""

from collections import defaultdict, deque

from domain.entities.notification import Notification

MAX_QUEUED_PER_RECIPIENT = 100


class InMemoryOutbox:
    """INotificationSink that queues notifications per recipient.

    Each queue is bounded; the oldest notification is dropped on overflow.
    """

    def __init__(self, max_per_recipient: int = MAX_QUEUED_PER_RECIPIENT) -> None:
        self._queues: defaultdict[str, deque[Notification]] = defaultdict(
            lambda: deque(maxlen=max_per_recipient)
        )

    def deliver(self, notification: Notification) -> None:
        self._queues[notification.recipient_id].append(notification)

    def drain(self, recipient_id: str) -> list[Notification]:
        queue = self._queues.pop(recipient_id, None)
        return list(queue) if queue else []

    def pending_count(self, recipient_id: str) -> int:
        queue = self._queues.get(recipient_id)
        return len(queue) if queue else 0
