"""General Router."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health", summary="헬스체크")
async def health():
    return {"status": "healthy", "service": "sso-api"}
