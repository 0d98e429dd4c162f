"""Domain Entities."""

from apps.sso.domain.entities.user import User

__all__ = ["User"]
