"""OAuth Provider Implementations."""

from apps.sso.infrastructure.oauth.client import OAuthIdentityGateway
from apps.sso.infrastructure.oauth.providers import (
    GoogleOAuthProvider,
    LinkedInOAuthProvider,
    OAuthProvider,
    OAuthProviderError,
)
from apps.sso.infrastructure.oauth.registry import ProviderRegistry

__all__ = [
    "OAuthProvider",
    "OAuthProviderError",
    "GoogleOAuthProvider",
    "LinkedInOAuthProvider",
    "ProviderRegistry",
    "OAuthIdentityGateway",
]
