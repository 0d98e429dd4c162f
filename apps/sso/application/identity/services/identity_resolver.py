"""Identity Resolver.

프로바이더 인증 코드 → 로컬 사용자 변환을 담당합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Mapping

from apps.sso.application.identity.dto import ResolvedIdentity
from apps.sso.application.identity.exceptions import UnsupportedProviderError

if TYPE_CHECKING:
    from apps.sso.application.identity.ports import IdentityProviderGateway, UsersGateway

logger = logging.getLogger(__name__)


class IdentityResolver:
    """Identity Resolver.

    Workflow:
        1. 프로바이더 Gateway로 코드 교환 (validate_user)
        2. UsersGateway로 사용자 조회/생성 (check_and_create_user)

    두 단계 모두 실패 시 재시도하지 않고 예외를 그대로 전파합니다.
    """

    def __init__(
        self,
        providers: Mapping[str, "IdentityProviderGateway"],
        users_gateway: "UsersGateway",
    ) -> None:
        self._providers = providers
        self._users_gateway = users_gateway

    async def resolve(self, provider: str, code: str) -> ResolvedIdentity:
        """인증 코드로 사용자를 확인합니다.

        Raises:
            UnsupportedProviderError: 등록되지 않은 프로바이더
            ProviderValidationFailedError: 프로바이더 검증 실패
            PersistenceFailedError: 사용자 조회/생성 실패
        """
        gateway = self._providers.get(provider)
        if gateway is None:
            raise UnsupportedProviderError(provider)

        identity = await gateway.validate_user(code)
        user = await self._users_gateway.check_and_create_user(identity.email, identity.profile)

        logger.debug(
            "Identity resolved",
            extra={"provider": provider, "user_id": str(user.id)},
        )
        return ResolvedIdentity(email=identity.email, profile=identity.profile, user=user)
