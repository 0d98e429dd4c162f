"""Callback DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from apps.sso.application.actions.dto import ActionResult
from apps.sso.domain.enums.action import SsoAction


@dataclass(frozen=True, slots=True)
class SsoCallbackRequest:
    """SSO 콜백 요청."""

    provider: str
    code: str
    state: str
    ip_address: str | None = None


@dataclass(frozen=True, slots=True)
class EnrichedResult:
    """작업 결과 + 사용자 식별 정보.

    Executor 결과에 email/profile/userLink를 덧붙인 구조로, Interactor가 조립합니다.
    """

    action: SsoAction
    result: ActionResult
    email: str
    profile: dict[str, Any]
    user_link: str

    def query_params(self) -> dict[str, Any]:
        """리다이렉트 쿼리 파라미터 (`/home`, `/sso-success` 공통).

        식별 정보 키(email, profile, userLink)가 작업 결과의 같은 키보다 우선합니다.
        """
        params = dict(self.result.fields)
        params.update(
            {
                "email": self.email,
                "profile": self.profile,
                "userLink": self.user_link,
            }
        )
        return params


class ResponseKind(str, Enum):
    """콜백 응답 유형."""

    BINARY = "binary"
    REDIRECT_HOME = "redirect_home"
    REDIRECT_SSO_SUCCESS = "redirect_sso_success"


@dataclass(frozen=True, slots=True)
class CallbackOutcome:
    """HTTP 응답으로 변환되기 직전의 결과.

    BINARY: body/media_type 사용, 그 외: redirect_url 사용.
    """

    kind: ResponseKind
    redirect_url: str | None = None
    body: bytes | None = None
    media_type: str | None = None
