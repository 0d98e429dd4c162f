"""Domain Services."""

from apps.sso.domain.services.state_codec import parse_intent

__all__ = ["parse_intent"]
