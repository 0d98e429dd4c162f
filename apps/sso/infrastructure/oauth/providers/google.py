"""Google OAuth Provider."""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps.sso.domain.value_objects.identity import Identity
from apps.sso.infrastructure.oauth.providers.base import (
    OAuthProvider,
    OAuthProviderError,
)

if TYPE_CHECKING:
    import httpx

GOOGLE_TOKEN_URL = "https://oauth2.googleapis.com/token"
GOOGLE_PROFILE_URL = "https://www.googleapis.com/oauth2/v3/userinfo"


class GoogleOAuthProvider(OAuthProvider):
    """Google OAuth 프로바이더."""

    name = "google"

    async def exchange_code(
        self,
        *,
        client: "httpx.AsyncClient",
        code: str,
        redirect_uri: str | None,
    ) -> dict:
        data = {
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": redirect_uri or self.redirect_uri,
            "code": code,
        }
        response = await client.post(GOOGLE_TOKEN_URL, data=data)
        response.raise_for_status()
        return self._json_object(response, "Google token response")

    async def fetch_identity(
        self,
        *,
        client: "httpx.AsyncClient",
        tokens: dict,
    ) -> Identity:
        access_token = self._access_token(tokens, "Google")
        headers = {"Authorization": f"Bearer {access_token}"}
        response = await client.get(GOOGLE_PROFILE_URL, headers=headers)
        response.raise_for_status()
        data = self._json_object(response, "Google userinfo response")

        email = data.get("email")
        if not email:
            raise OAuthProviderError("Google profile has no email")

        return Identity(
            email=email,
            profile={
                "id": data.get("sub"),
                "firstName": data.get("given_name"),
                "lastName": data.get("family_name"),
                "pictureUrl": data.get("picture"),
            },
        )
