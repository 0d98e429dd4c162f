"""Identity ports."""

from apps.sso.application.identity.ports.identity_provider_gateway import (
    IdentityProviderGateway,
)
from apps.sso.application.identity.ports.users_gateway import UsersGateway

__all__ = ["IdentityProviderGateway", "UsersGateway"]
