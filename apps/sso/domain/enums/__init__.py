"""Domain Enums."""

from apps.sso.domain.enums.action import SsoAction

__all__ = ["SsoAction"]
