"""Action Executor.

Intent의 action에 따라 정확히 하나의 작업을 수행합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Awaitable, Callable

from apps.sso.application.actions.dto import ActionResult
from apps.sso.domain.enums.action import SsoAction

if TYPE_CHECKING:
    from apps.sso.application.actions.ports import (
        AgreementGateway,
        AgreementPdfGateway,
        TokenIssuer,
    )
    from apps.sso.domain.entities.user import User
    from apps.sso.domain.value_objects.intent import Intent

logger = logging.getLogger(__name__)

_Handler = Callable[["User", "Intent"], Awaitable[ActionResult]]


class ActionExecutor:
    """Action Executor.

    Dependencies:
        - agreement_gateway: 채택/철회 (ADOPT, REVOKE)
        - pdf_gateway: PDF 조회 (PDF)
        - token_issuer: 세션 토큰 서명 (LOGIN)

    위임 대상의 예외(AdoptionFailedError 등)는 변환 없이 그대로 전파됩니다.
    """

    def __init__(
        self,
        agreement_gateway: "AgreementGateway",
        pdf_gateway: "AgreementPdfGateway",
        token_issuer: "TokenIssuer",
    ) -> None:
        self._agreement_gateway = agreement_gateway
        self._pdf_gateway = pdf_gateway
        self._token_issuer = token_issuer
        self._handlers: dict[SsoAction, _Handler] = {
            SsoAction.ADOPT: self._adopt,
            SsoAction.REVOKE: self._revoke,
            SsoAction.PDF: self._get_pdf,
            SsoAction.LOGIN: self._login,
        }
        missing = set(SsoAction) - set(self._handlers)
        if missing:
            raise RuntimeError(f"No handler for actions: {sorted(a.value for a in missing)}")

    async def execute(self, user: "User", intent: "Intent") -> ActionResult:
        """Intent에 해당하는 작업을 실행합니다."""
        handler = self._handlers[intent.action]
        result = await handler(user, intent)
        logger.info(
            "SSO action completed",
            extra={"action": intent.action.value, "user_id": str(user.id)},
        )
        return result

    async def _adopt(self, user: "User", intent: "Intent") -> ActionResult:
        return ActionResult.of_fields(await self._agreement_gateway.adopt(intent, user))

    async def _revoke(self, user: "User", intent: "Intent") -> ActionResult:
        return ActionResult.of_fields(await self._agreement_gateway.revoke(intent, user))

    async def _get_pdf(self, user: "User", intent: "Intent") -> ActionResult:
        document = await self._pdf_gateway.get_pdf(intent.link, user.email)
        return ActionResult.of_document(document)

    async def _login(self, user: "User", intent: "Intent") -> ActionResult:
        token = self._token_issuer.issue_token(user.id)
        return ActionResult.of_fields({"token": token})
