"""SsoCallback Command.

SSO 콜백 처리 Use Case입니다.

Architecture:
    - UseCase(지휘자): SsoCallbackInteractor
    - Services(연주자): IdentityResolver, ActionExecutor, ResponseTranslator
    - Domain: parse_intent (State Codec)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.sso.application.callback.dto import (
    CallbackOutcome,
    EnrichedResult,
    SsoCallbackRequest,
)
from apps.sso.domain.services import parse_intent

if TYPE_CHECKING:
    from apps.sso.application.actions.services import ActionExecutor
    from apps.sso.application.callback.services import ResponseTranslator
    from apps.sso.application.identity.services import IdentityResolver

logger = logging.getLogger(__name__)


class SsoCallbackInteractor:
    """SSO 콜백 Interactor (지휘자).

    Workflow:
        1. state 해석 및 요청자 IP 부착
        2. 사용자 확인 (IdentityResolver)
        3. 작업 실행 (ActionExecutor)
        4. email/profile/userLink 병합
        5. 응답 유형 결정 (ResponseTranslator)

    각 단계는 순서대로 한 번씩만 실행되며, 어느 단계의 예외도 여기서 처리하지 않습니다.
    """

    def __init__(
        self,
        identity_resolver: "IdentityResolver",
        action_executor: "ActionExecutor",
        response_translator: "ResponseTranslator",
    ) -> None:
        self._identity_resolver = identity_resolver
        self._action_executor = action_executor
        self._response_translator = response_translator

    async def execute(self, request: SsoCallbackRequest) -> CallbackOutcome:
        """SSO 콜백을 처리합니다.

        Raises:
            MalformedStateError, InvalidIntentError: 잘못된 state
            ProviderValidationFailedError, PersistenceFailedError: 사용자 확인 실패
            AdoptionFailedError, RevocationFailedError,
            PdfGenerationFailedError, TokenIssuanceFailedError: 작업 실패
        """
        # 1. state 해석
        intent = parse_intent(request.state).with_ip(request.ip_address)

        # 2. 사용자 확인
        identity = await self._identity_resolver.resolve(request.provider, request.code)
        user = identity.user

        # 3. 작업 실행
        result = await self._action_executor.execute(user, intent)

        # 4. 결과 병합
        enriched = EnrichedResult(
            action=intent.action,
            result=result,
            email=identity.email,
            profile=identity.profile,
            user_link=user.link,
        )

        # 5. 응답 변환
        outcome = self._response_translator.translate(enriched)

        logger.info(
            "SSO callback handled",
            extra={
                "provider": request.provider,
                "action": intent.action.value,
                "user_id": str(user.id),
                "response_kind": outcome.kind.value,
            },
        )
        return outcome
