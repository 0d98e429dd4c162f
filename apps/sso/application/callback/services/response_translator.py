"""Response Translator.

작업 결과를 세 가지 응답 유형(바이너리, /home 리다이렉트, /sso-success 리다이렉트) 중
하나로 변환합니다.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Mapping
from urllib.parse import urlencode

from apps.sso.application.callback.dto import CallbackOutcome, EnrichedResult, ResponseKind
from apps.sso.domain.enums.action import SsoAction

HOME_PATH = "/home"
SSO_SUCCESS_PATH = "/sso-success"


def _stringify(value: Any) -> str:
    # 쿼리는 평탄한 key/value만 지원하므로 중첩 구조는 JSON 문자열로 전달
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def encode_query(params: Mapping[str, Any]) -> str:
    """dict를 URL 쿼리 문자열로 변환. None 값은 생략."""
    return urlencode(
        [(key, _stringify(value)) for key, value in params.items() if value is not None]
    )


class ResponseTranslator:
    """Response Translator.

    Args:
        base_url: 프론트엔드 오리진 (설정에서 주입)
    """

    def __init__(self, base_url: str) -> None:
        self._base_url = base_url.rstrip("/")
        self._translators: dict[SsoAction, Callable[[EnrichedResult], CallbackOutcome]] = {
            SsoAction.PDF: self._binary,
            SsoAction.LOGIN: self._home,
            SsoAction.ADOPT: self._sso_success,
            SsoAction.REVOKE: self._sso_success,
        }

    def translate(self, enriched: EnrichedResult) -> CallbackOutcome:
        return self._translators[enriched.action](enriched)

    def _redirect_url(self, path: str, params: Mapping[str, Any]) -> str:
        query = encode_query(params)
        return f"{self._base_url}{path}?{query}" if query else f"{self._base_url}{path}"

    def _binary(self, enriched: EnrichedResult) -> CallbackOutcome:
        document = enriched.result.document
        if document is None:
            raise ValueError("PDF action finished without a document")
        return CallbackOutcome(
            kind=ResponseKind.BINARY,
            body=document.body,
            media_type=document.content_type,
        )

    def _home(self, enriched: EnrichedResult) -> CallbackOutcome:
        return CallbackOutcome(
            kind=ResponseKind.REDIRECT_HOME,
            redirect_url=self._redirect_url(HOME_PATH, enriched.query_params()),
        )

    def _sso_success(self, enriched: EnrichedResult) -> CallbackOutcome:
        return CallbackOutcome(
            kind=ResponseKind.REDIRECT_SSO_SUCCESS,
            redirect_url=self._redirect_url(SSO_SUCCESS_PATH, enriched.query_params()),
        )
