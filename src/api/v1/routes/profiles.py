"""Profile and skill API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.actor import CurrentActor
from api.v1.dependencies import get_persistence_service, get_profile_service
from api.v1.schemas.profile import (
    ProfileCreate,
    ProfileDetailResponse,
    ProfileResponse,
    SkillCatalogResponse,
    SkillsUpdate,
    SkillToggleRequest,
    SkillToggleResponse,
    SkillToggleState,
)
from core.rate_limit import limiter
from domain.entities.profile import Profile
from domain.services.persistence_service import PersistenceService
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.post(
    "",
    response_model=ProfileDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a profile",
    responses={
        201: {"description": "Profile registered"},
        400: {"description": "Handle missing"},
        409: {"description": "Already registered"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def register_profile(
    request: Request,
    body: ProfileCreate,
    actor_id: CurrentActor,
    service: ProfileService = Depends(get_profile_service),
    persistence: PersistenceService = Depends(get_persistence_service),
) -> ProfileDetailResponse:
    """Register the acting user. A non-empty handle is required."""
    profile = service.register(actor_id, handle=body.handle, display_name=body.display_name)
    await persistence.save()
    return ProfileDetailResponse(data=_build_profile_response(service, profile))


@router.get(
    "/me",
    response_model=ProfileDetailResponse,
    summary="View own profile",
    responses={
        200: {"description": "The actor's profile"},
        403: {"description": "Not registered"},
    },
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_my_profile(
    request: Request,
    actor_id: CurrentActor,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get the actor's profile, including the name of their team."""
    profile = service.get(actor_id)
    return ProfileDetailResponse(data=_build_profile_response(service, profile))


@router.get(
    "/me/skills",
    response_model=SkillCatalogResponse,
    summary="Skill catalog with selection",
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_skill_toggles(
    request: Request,
    actor_id: CurrentActor,
    service: ProfileService = Depends(get_profile_service),
) -> SkillCatalogResponse:
    """Get every catalog skill with whether the actor has selected it."""
    data = _build_toggles(service, actor_id)
    return SkillCatalogResponse(
        data=data, meta={"selected": sum(1 for t in data if t.selected)}
    )


@router.post(
    "/me/skills/toggle",
    response_model=SkillToggleResponse,
    summary="Toggle a skill",
    responses={
        200: {"description": "Skill toggled"},
        400: {"description": "Unknown skill"},
    },
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def toggle_skill(
    request: Request,
    body: SkillToggleRequest,
    actor_id: CurrentActor,
    service: ProfileService = Depends(get_profile_service),
    persistence: PersistenceService = Depends(get_persistence_service),
) -> SkillToggleResponse:
    """Add the skill if the actor lacks it, otherwise remove it."""
    selected = service.toggle_skill(actor_id, body.skill)
    await persistence.save()
    return SkillToggleResponse(
        skill=body.skill,
        selected=selected,
        data=_build_toggles(service, actor_id),
    )


@router.put(
    "/me/skills",
    response_model=ProfileDetailResponse,
    summary="Replace skills",
    responses={
        200: {"description": "Skills replaced"},
        400: {"description": "Unknown skill"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def replace_skills(
    request: Request,
    body: SkillsUpdate,
    actor_id: CurrentActor,
    service: ProfileService = Depends(get_profile_service),
    persistence: PersistenceService = Depends(get_persistence_service),
) -> ProfileDetailResponse:
    """Replace the actor's skill selection."""
    profile = service.set_skills(actor_id, body.skills)
    await persistence.save()
    return ProfileDetailResponse(data=_build_profile_response(service, profile))


def _build_toggles(service: ProfileService, actor_id: str) -> list[SkillToggleState]:
    return [
        SkillToggleState(name=name, selected=selected)
        for name, selected in service.skill_toggles(actor_id)
    ]


def _build_profile_response(service: ProfileService, profile: Profile) -> ProfileResponse:
    """Convert domain entity to response schema."""
    team = service.get_team(profile)
    return ProfileResponse(
        id=profile.id,
        handle=profile.handle,
        display_name=profile.display_name,
        skills=list(profile.skills),
        team_id=profile.team_id,
        team_name=team.name if team else None,
        verified=profile.verified,
        verification_tags=list(profile.verification_tags),
        created_at=profile.created_at,
    )
