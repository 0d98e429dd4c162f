"""Google Callback Controller."""

from fastapi import APIRouter, Depends, Query, Request, Response

from apps.sso.application.callback.commands import SsoCallbackInteractor
from apps.sso.application.callback.dto import SsoCallbackRequest
from apps.sso.presentation.http.utils import get_remote_ip_address, to_http_response
from apps.sso.setup.dependencies import get_sso_callback_interactor

router = APIRouter()

PROVIDER = "google"


@router.get(
    "/google",
    summary="Google SSO 콜백",
    response_class=Response,
)
async def google_callback(
    request: Request,
    code: str = Query(..., description="OAuth 인증 코드"),
    state: str = Query(..., description="작업 의도 (JSON)"),
    interactor: SsoCallbackInteractor = Depends(get_sso_callback_interactor),
) -> Response:
    """Google 콜백을 처리합니다.

    LinkedIn과 달리 error 파라미터 분기가 없습니다.
    """
    outcome = await interactor.execute(
        SsoCallbackRequest(
            provider=PROVIDER,
            code=code,
            state=state,
            ip_address=get_remote_ip_address(request),
        )
    )
    return to_http_response(outcome)
