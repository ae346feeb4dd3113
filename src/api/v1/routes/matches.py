"""Teammate match API routes."""

from fastapi import APIRouter, Depends, Query, Request

from api.dependencies.actor import CurrentActor
from api.v1.dependencies import get_profile_service
from api.v1.schemas.match import MatchListResponse, MatchResponse
from core.config import settings
from core.rate_limit import limiter
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/matches", tags=["matches"])


@router.get(
    "",
    response_model=MatchListResponse,
    summary="Find teammates",
    responses={
        200: {"description": "Best complementary teammates, highest score first"},
        403: {"description": "Not registered"},
        404: {"description": "No skills recorded yet"},
    },
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def find_teammates(
    request: Request,
    actor_id: CurrentActor,
    limit: int | None = Query(None, ge=1, le=50, description="How many matches to show"),
    service: ProfileService = Depends(get_profile_service),
) -> MatchListResponse:
    """Rank other participants by the skills they would add to the actor."""
    limit = limit or settings.match_display_limit
    matches = service.find_teammates(actor_id)

    data = []
    for match in matches[:limit]:
        candidate = match.candidate
        team = service.get_team(candidate)
        data.append(
            MatchResponse(
                profile_id=candidate.id,
                handle=candidate.handle,
                display_name=candidate.display_name,
                verified=candidate.verified,
                score=match.score,
                complementary_skills=list(match.complementary_skills),
                team_id=team.id if team else None,
                team_name=team.name if team else None,
            )
        )
    return MatchListResponse(data=data, meta={"total": len(matches), "limit": limit})
