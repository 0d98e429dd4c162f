"""OAuth Provider Base Class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from apps.sso.domain.value_objects.identity import Identity


class OAuthProviderError(RuntimeError):
    """OAuth 프로바이더 응답 오류."""

    pass


class OAuthProvider(ABC):
    """OAuth 프로바이더 추상 클래스."""

    name: str

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str | None,
        redirect_uri: str | None,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri

    @abstractmethod
    async def exchange_code(
        self,
        *,
        client: "httpx.AsyncClient",
        code: str,
        redirect_uri: str | None,
    ) -> dict:
        """인증 코드로 토큰 교환."""
        raise NotImplementedError

    @abstractmethod
    async def fetch_identity(
        self,
        *,
        client: "httpx.AsyncClient",
        tokens: dict,
    ) -> "Identity":
        """이메일/프로필 조회."""
        raise NotImplementedError

    @staticmethod
    def _json_object(response: "httpx.Response", what: str) -> dict:
        """응답 본문이 JSON 객체인지 확인."""
        data = response.json()
        if not isinstance(data, dict):
            raise OAuthProviderError(f"{what} is not a JSON object")
        return data

    @staticmethod
    def _access_token(tokens: dict, provider_label: str) -> str:
        access_token = tokens.get("access_token")
        if not access_token:
            raise OAuthProviderError(f"Missing {provider_label} access token")
        return access_token
