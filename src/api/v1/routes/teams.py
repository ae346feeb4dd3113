"""Team API routes."""

from uuid import UUID

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.actor import CurrentActor
from api.v1.dependencies import get_persistence_service, get_team_service
from api.v1.schemas.team import (
    ExportRowResponse,
    LeaveTeamResponse,
    TeamCreate,
    TeamDetail,
    TeamDetailResponse,
    TeamExportResponse,
    TeamListResponse,
    TeamMemberResponse,
    TeamResponse,
)
from core.rate_limit import limiter
from domain.entities.team import LeaveOutcome, LeaveResult, Team
from domain.services.persistence_service import PersistenceService
from domain.services.team_service import TeamService

router = APIRouter(prefix="/teams", tags=["teams"])


@router.get(
    "",
    response_model=TeamListResponse,
    summary="List teams",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def list_teams(
    request: Request,
    actor_id: CurrentActor,
    service: TeamService = Depends(get_team_service),
) -> TeamListResponse:
    """Get all teams in creation order."""
    data = [_build_team_response(team) for team in service.list_teams()]
    return TeamListResponse(data=data, meta={"total": len(data)})


@router.post(
    "",
    response_model=TeamDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a team",
    responses={
        201: {"description": "Team created with the actor as founder"},
        400: {"description": "Empty team name"},
        403: {"description": "Not registered"},
        409: {"description": "Already in a team"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def create_team(
    request: Request,
    body: TeamCreate,
    actor_id: CurrentActor,
    service: TeamService = Depends(get_team_service),
    persistence: PersistenceService = Depends(get_persistence_service),
) -> TeamDetailResponse:
    """Create a new team. Share its ID so others can join."""
    team = service.create(actor_id, body.name)
    await persistence.save()
    return TeamDetailResponse(data=_build_team_detail(service, team))


@router.get(
    "/mine",
    response_model=TeamDetailResponse,
    summary="Get own team",
    responses={
        200: {"description": "The actor's team"},
        400: {"description": "Not in a team"},
    },
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_my_team(
    request: Request,
    actor_id: CurrentActor,
    service: TeamService = Depends(get_team_service),
) -> TeamDetailResponse:
    """Get the team the actor belongs to."""
    team = service.get_for_member(actor_id)
    return TeamDetailResponse(data=_build_team_detail(service, team))


@router.delete(
    "/mine/members/me",
    response_model=LeaveTeamResponse,
    summary="Leave own team",
    responses={
        200: {"description": "Left the team (disbanded if it became empty)"},
        400: {"description": "Not in a team"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def leave_team(
    request: Request,
    actor_id: CurrentActor,
    service: TeamService = Depends(get_team_service),
    persistence: PersistenceService = Depends(get_persistence_service),
) -> LeaveTeamResponse:
    """Leave the actor's team."""
    result = service.leave(actor_id)
    await persistence.save()
    return LeaveTeamResponse(
        team_id=result.team_id,
        team_name=result.team_name,
        outcome=result.outcome.value,
        founder_id=result.founder_id,
        message=_leave_message(result),
    )


@router.get(
    "/mine/export",
    response_model=TeamExportResponse,
    summary="Export own team",
    responses={
        200: {"description": "One row per member"},
        400: {"description": "Not in a team"},
        403: {"description": "Only the founder can export"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def export_team(
    request: Request,
    actor_id: CurrentActor,
    service: TeamService = Depends(get_team_service),
) -> TeamExportResponse:
    """Export member rows of the actor's team. Founder only."""
    rows = service.export_rows(actor_id)
    data = [
        ExportRowResponse(
            name=row.name,
            handle=row.handle,
            verified=row.verified,
            skills=list(row.skills),
        )
        for row in rows
    ]
    return TeamExportResponse(
        data=data,
        meta={"columns": ["name", "handle", "verified", "skills"], "total": len(data)},
    )


@router.get(
    "/{team_id}",
    response_model=TeamDetailResponse,
    summary="Get team info",
    responses={
        200: {"description": "Team with its members"},
        404: {"description": "Team not found"},
    },
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_team(
    request: Request,
    team_id: UUID,
    actor_id: CurrentActor,
    service: TeamService = Depends(get_team_service),
) -> TeamDetailResponse:
    """Get a team by ID."""
    team = service.get(team_id)
    return TeamDetailResponse(data=_build_team_detail(service, team))


@router.post(
    "/{team_id}/members",
    response_model=TeamDetailResponse,
    summary="Join a team",
    responses={
        200: {"description": "Joined the team"},
        403: {"description": "Not registered"},
        404: {"description": "Team not found"},
        409: {"description": "Already in a team, or the team is full"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def join_team(
    request: Request,
    team_id: UUID,
    actor_id: CurrentActor,
    service: TeamService = Depends(get_team_service),
    persistence: PersistenceService = Depends(get_persistence_service),
) -> TeamDetailResponse:
    """Join an existing team. The founder is notified."""
    team = service.join(actor_id, team_id)
    await persistence.save()
    return TeamDetailResponse(data=_build_team_detail(service, team))


def _leave_message(result: LeaveResult) -> str:
    if result.outcome is LeaveOutcome.DISBANDED:
        return (
            f'You\'ve left team "{result.team_name}" and since it\'s now empty, '
            "the team has been disbanded."
        )
    return f'You\'ve successfully left team "{result.team_name}".'


def _build_team_response(team: Team) -> TeamResponse:
    """Convert domain entity to response schema."""
    return TeamResponse(
        id=team.id,
        name=team.name,
        founder_id=team.founder_id,
        member_count=team.member_count,
        max_members=team.max_members,
        verified_count=team.verified_count,
        skills=list(team.skills),
        created_at=team.created_at,
    )


def _build_team_detail(service: TeamService, team: Team) -> TeamDetail:
    members = [
        TeamMemberResponse(
            id=member.id,
            handle=member.handle,
            display_name=member.display_name,
            verified=member.verified,
            is_founder=member.id == team.founder_id,
        )
        for member in service.get_members(team)
    ]
    return TeamDetail(
        **_build_team_response(team).model_dump(),
        members=members,
    )
