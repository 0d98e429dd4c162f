"""Identity exceptions."""

from apps.sso.application.identity.exceptions.identity import (
    PersistenceFailedError,
    ProviderValidationFailedError,
    UnsupportedProviderError,
)

__all__ = [
    "ProviderValidationFailedError",
    "PersistenceFailedError",
    "UnsupportedProviderError",
]
