"""Callback Response Utilities.

CallbackOutcome을 FastAPI Response로 변환하고, 프로바이더 오류 리다이렉트를 만듭니다.
"""

from fastapi import Response
from fastapi.responses import RedirectResponse

from apps.sso.application.callback.dto import CallbackOutcome, ResponseKind
from apps.sso.application.callback.services import encode_query

SSO_FAIL_PATH = "/sso-fail"


class SsoFailRedirect(Exception):
    """`/sso-fail` 리다이렉트 신호.

    콜백 의존성에서 발생시키면 전역 예외 핸들러가 302 응답으로 변환합니다.
    """

    def __init__(self, url: str) -> None:
        super().__init__(url)
        self.url = url


def build_sso_fail_url(frontend_url: str, message: str) -> str:
    """프로바이더 오류 리다이렉트 URL 생성.

    예시:
        build_sso_fail_url("http://localhost:3000", "access_denied")
        → "http://localhost:3000/sso-fail?message=access_denied"
    """
    sanitized = frontend_url.rstrip("/")
    return f"{sanitized}{SSO_FAIL_PATH}?{encode_query({'message': message})}"


def to_http_response(outcome: CallbackOutcome) -> Response:
    """CallbackOutcome → HTTP Response.

    BINARY는 본문을 그대로(바이트 단위) 전송하고, 나머지는 302 리다이렉트입니다.
    """
    if outcome.kind is ResponseKind.BINARY:
        return Response(content=outcome.body or b"", media_type=outcome.media_type)
    if not outcome.redirect_url:
        raise ValueError(f"Redirect outcome without URL: {outcome.kind.value}")
    return RedirectResponse(url=outcome.redirect_url, status_code=302)
