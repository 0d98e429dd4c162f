"""API v1 Router."""

from fastapi import APIRouter

from apps.sso.presentation.http.controllers.general.router import (
    router as general_router,
)
from apps.sso.presentation.http.controllers.sso.router import router as sso_router

router = APIRouter()

# SSO callback endpoints
router.include_router(sso_router, prefix="/sso", tags=["sso"])

# General endpoints (health)
router.include_router(general_router, tags=["general"])
