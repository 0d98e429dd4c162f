"""OAuth Providers.

각 OAuth 프로바이더 구현체입니다.
"""

from apps.sso.infrastructure.oauth.providers.base import (
    OAuthProvider,
    OAuthProviderError,
)
from apps.sso.infrastructure.oauth.providers.google import GoogleOAuthProvider
from apps.sso.infrastructure.oauth.providers.linkedin import LinkedInOAuthProvider

__all__ = [
    "OAuthProvider",
    "OAuthProviderError",
    "GoogleOAuthProvider",
    "LinkedInOAuthProvider",
]
