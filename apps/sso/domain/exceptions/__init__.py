"""Domain Exceptions."""

from apps.sso.domain.exceptions.base import DomainError
from apps.sso.domain.exceptions.intent import InvalidIntentError, MalformedStateError

__all__ = [
    "DomainError",
    "MalformedStateError",
    "InvalidIntentError",
]
