"""Identity services."""

from apps.sso.application.identity.services.identity_resolver import IdentityResolver

__all__ = ["IdentityResolver"]
