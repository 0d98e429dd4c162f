"""Identity DTOs."""

from apps.sso.application.identity.dto.identity import ResolvedIdentity

__all__ = ["ResolvedIdentity"]
