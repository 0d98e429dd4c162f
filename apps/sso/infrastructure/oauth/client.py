"""OAuth Identity Gateway.

IdentityProviderGateway 포트의 구현체입니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from apps.sso.application.identity.exceptions import ProviderValidationFailedError
from apps.sso.domain.value_objects.identity import Identity
from apps.sso.infrastructure.oauth.providers.base import OAuthProviderError

if TYPE_CHECKING:
    from apps.sso.infrastructure.oauth.providers.base import OAuthProvider

logger = logging.getLogger(__name__)


class OAuthIdentityGateway:
    """프로바이더 하나에 대한 IdentityProviderGateway 구현체."""

    def __init__(
        self,
        provider: "OAuthProvider",
        timeout_seconds: float,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            provider: OAuth 프로바이더
            timeout_seconds: HTTP 클라이언트 타임아웃 (설정에서 주입)
            transport: httpx 전송 계층 (테스트 시 MockTransport 주입)
        """
        self._provider = provider
        self._timeout = timeout_seconds
        self._transport = transport

    async def validate_user(self, code: str) -> Identity:
        """토큰 교환 및 이메일/프로필 조회."""
        name = self._provider.name
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                tokens = await self._provider.exchange_code(
                    client=client,
                    code=code,
                    redirect_uri=self._provider.redirect_uri,
                )
                return await self._provider.fetch_identity(client=client, tokens=tokens)

        except httpx.HTTPStatusError as e:
            logger.warning(f"{name} API error: {e.response.status_code}")
            raise ProviderValidationFailedError(
                name, f"API error: {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning(f"{name} request failed: {e}")
            raise ProviderValidationFailedError(name, str(e)) from e
        except OAuthProviderError as e:
            logger.warning(f"{name} response invalid: {e}")
            raise ProviderValidationFailedError(name, str(e)) from e
        except ValueError as e:
            logger.warning(f"{name} returned invalid JSON")
            raise ProviderValidationFailedError(name, "invalid JSON response") from e
