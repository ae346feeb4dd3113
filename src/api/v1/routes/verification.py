"""Verification API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.actor import CurrentActor
from api.v1.dependencies import (
    get_keyword_verifier,
    get_persistence_service,
    get_verification_service,
)
from api.v1.schemas.verification import VerificationResponse, VerificationSubmission
from core.rate_limit import limiter
from domain.services.persistence_service import PersistenceService
from domain.services.verification_service import VerificationService
from infrastructure.verification.keyword_verifier import KeywordVerifier

router = APIRouter(prefix="/verification", tags=["verification"])


@router.post(
    "",
    response_model=VerificationResponse,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Start verification",
    responses={
        202: {"description": "Waiting for the confirmation screenshot"},
        403: {"description": "Not registered"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def start_verification(
    request: Request,
    actor_id: CurrentActor,
    service: VerificationService = Depends(get_verification_service),
) -> VerificationResponse:
    """Mark the actor as waiting for a screenshot check. Verification is optional."""
    service.start(actor_id)
    return VerificationResponse(
        pending=True,
        verified=False,
        message="Please send a screenshot of your event confirmation email.",
    )


@router.post(
    "/result",
    response_model=VerificationResponse,
    summary="Submit screenshot text",
    responses={
        200: {"description": "Verification outcome"},
        403: {"description": "Not registered"},
        409: {"description": "No verification in progress"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def submit_verification(
    request: Request,
    body: VerificationSubmission,
    actor_id: CurrentActor,
    service: VerificationService = Depends(get_verification_service),
    verifier: KeywordVerifier = Depends(get_keyword_verifier),
    persistence: PersistenceService = Depends(get_persistence_service),
) -> VerificationResponse:
    """Check the text extracted from the screenshot and apply the outcome."""
    outcome = verifier.evaluate(body.text)
    profile = service.complete(actor_id, outcome)
    if outcome.matched:
        await persistence.save()
        message = f"Verification successful! We detected: {', '.join(outcome.tags)}"
    else:
        message = (
            "Verification unsuccessful. We couldn't detect enough event details "
            "in your image. Start again to retry."
        )
    return VerificationResponse(
        pending=False,
        matched=outcome.matched,
        verified=profile.verified,
        tags=list(outcome.tags),
        message=message,
    )
