"""Domain Value Objects."""

from apps.sso.domain.value_objects.identity import Identity
from apps.sso.domain.value_objects.intent import Intent

__all__ = ["Intent", "Identity"]
