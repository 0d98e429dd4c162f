"""Security adapters."""

from apps.sso.infrastructure.security.jwt_token_service import JwtTokenService

__all__ = ["JwtTokenService"]
