"""Notification API routes."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.actor import CurrentActor
from api.v1.dependencies import get_notification_service
from api.v1.schemas.notification import NotificationListResponse, NotificationResponse
from core.rate_limit import limiter
from domain.services.notification_service import NotificationService

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get(
    "",
    response_model=NotificationListResponse,
    summary="Drain pending notifications",
    responses={
        200: {"description": "Notifications queued for the actor, oldest first"},
    },
)
@limiter.limit("60/minute")  # type: ignore[untyped-decorator]
async def drain_notifications(
    request: Request,
    actor_id: CurrentActor,
    service: NotificationService = Depends(get_notification_service),
) -> NotificationListResponse:
    """Return and clear the actor's queued notifications."""
    data = [
        NotificationResponse(
            id=n.id,
            type=n.type_name,
            team_id=n.team_id,
            actor_id=n.actor_id,
            message=n.message,
            metadata=n.metadata,
            created_at=n.created_at,
        )
        for n in service.pending_for(actor_id)
    ]
    return NotificationListResponse(data=data, meta={"total": len(data)})
