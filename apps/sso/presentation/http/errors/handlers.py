"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
콜백 컨트롤러는 예외를 직접 처리하지 않고 이곳으로 전달합니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, RedirectResponse

from apps.sso.application.common.exceptions import ApplicationError
from apps.sso.domain.exceptions import DomainError
from apps.sso.presentation.http.errors.translators import translate_error
from apps.sso.presentation.http.utils.redirect import SsoFailRedirect

logger = logging.getLogger(__name__)


def _error_response(request: Request, exc: DomainError | ApplicationError) -> JSONResponse:
    status_code, code = translate_error(exc)
    log = logger.error if status_code >= 500 else logger.warning
    log(
        f"SSO request failed: {type(exc).__name__}: {exc.message}",
        extra={"path": request.url.path, "code": code},
    )
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "code": code},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(SsoFailRedirect)
    async def sso_fail_redirect_handler(request: Request, exc: SsoFailRedirect):
        return RedirectResponse(url=exc.url, status_code=302)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return _error_response(request, exc)

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return _error_response(request, exc)
