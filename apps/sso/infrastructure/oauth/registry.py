"""OAuth Provider Registry."""

from __future__ import annotations

from typing import Mapping, Optional

from apps.sso.infrastructure.oauth.client import OAuthIdentityGateway
from apps.sso.infrastructure.oauth.providers import (
    GoogleOAuthProvider,
    LinkedInOAuthProvider,
    OAuthProvider,
)
from apps.sso.setup.config import Settings


class ProviderRegistry:
    def __init__(self, settings: Settings):
        self.settings = settings
        self.providers: Mapping[str, OAuthProvider] = self._build()

    def _build(self) -> Mapping[str, OAuthProvider]:
        return {
            "linkedin": LinkedInOAuthProvider(
                client_id=self.settings.linkedin_client_id,
                client_secret=self.settings.linkedin_client_secret,
                redirect_uri=self._resolve_redirect_uri(
                    self.settings.linkedin_redirect_uri, "linkedin"
                ),
            ),
            "google": GoogleOAuthProvider(
                client_id=self.settings.google_client_id,
                client_secret=self.settings.google_client_secret,
                redirect_uri=self._resolve_redirect_uri(
                    self.settings.google_redirect_uri, "google"
                ),
            ),
        }

    def gateways(self) -> dict[str, OAuthIdentityGateway]:
        """프로바이더 이름 → IdentityProviderGateway."""
        timeout = self.settings.http_timeout_seconds
        return {
            name: OAuthIdentityGateway(provider, timeout)
            for name, provider in self.providers.items()
        }

    def _resolve_redirect_uri(self, override: Optional[object], provider: str) -> Optional[str]:
        if override:
            return str(override)
        template = self.settings.oauth_redirect_template
        if not template:
            return None
        return template.format(provider=provider)
