"""LinkedIn Callback Controller."""

import logging

from fastapi import APIRouter, Depends, Query, Request, Response

from apps.sso.application.callback.commands import SsoCallbackInteractor
from apps.sso.application.callback.dto import SsoCallbackRequest
from apps.sso.application.common.exceptions import MissingParameterError
from apps.sso.presentation.http.utils import (
    SsoFailRedirect,
    build_sso_fail_url,
    get_remote_ip_address,
    to_http_response,
)
from apps.sso.setup.config import Settings, get_settings
from apps.sso.setup.dependencies import get_sso_callback_interactor

logger = logging.getLogger(__name__)

router = APIRouter()

PROVIDER = "linkedin"


def reject_provider_error(
    error: str | None = Query(None, description="프로바이더 오류"),
    settings: Settings = Depends(get_settings),
) -> None:
    """프로바이더가 돌려준 error 처리.

    콜백의 다른 의존성(DB 세션, 프로바이더, agreements 클라이언트)보다 먼저 평가됩니다.
    error가 있으면 아무것도 생성하지 않고 `/sso-fail`로 리다이렉트합니다.
    """
    if error:
        logger.info("LinkedIn returned an error", extra={"error": error})
        raise SsoFailRedirect(build_sso_fail_url(settings.frontend_url, error))


@router.get(
    "/linkedin",
    summary="LinkedIn SSO 콜백",
    response_class=Response,
)
async def linkedin_callback(
    request: Request,
    state: str = Query(..., description="작업 의도 (JSON)"),
    code: str | None = Query(None, description="OAuth 인증 코드"),
    _provider_error: None = Depends(reject_provider_error),
    interactor: SsoCallbackInteractor = Depends(get_sso_callback_interactor),
) -> Response:
    """LinkedIn 콜백을 처리합니다.

    reject_provider_error가 interactor보다 앞에 선언되어야 합니다.
    그 외 예외는 전역 예외 핸들러가 처리합니다.
    """
    if not code:
        raise MissingParameterError("code")

    outcome = await interactor.execute(
        SsoCallbackRequest(
            provider=PROVIDER,
            code=code,
            state=state,
            ip_address=get_remote_ip_address(request),
        )
    )
    return to_http_response(outcome)
