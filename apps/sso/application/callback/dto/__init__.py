"""Callback DTOs."""

from apps.sso.application.callback.dto.callback import (
    CallbackOutcome,
    EnrichedResult,
    ResponseKind,
    SsoCallbackRequest,
)

__all__ = [
    "SsoCallbackRequest",
    "EnrichedResult",
    "ResponseKind",
    "CallbackOutcome",
]
