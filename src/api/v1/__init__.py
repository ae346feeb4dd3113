"""API v1 router configuration."""

from fastapi import APIRouter

from api.v1.routes.matches import router as matches_router
from api.v1.routes.notifications import router as notifications_router
from api.v1.routes.profiles import router as profiles_router
from api.v1.routes.teams import router as teams_router
from api.v1.routes.verification import router as verification_router

router = APIRouter()
router.include_router(profiles_router)
router.include_router(matches_router)
router.include_router(teams_router)
router.include_router(verification_router)
router.include_router(notifications_router)
