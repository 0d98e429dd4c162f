"""SSO Router.

프로바이더별 콜백 엔드포인트를 통합합니다.
"""

from fastapi import APIRouter

from apps.sso.presentation.http.controllers.sso.google import router as google_router
from apps.sso.presentation.http.controllers.sso.linkedin import router as linkedin_router

router = APIRouter()

router.include_router(linkedin_router)
router.include_router(google_router)
