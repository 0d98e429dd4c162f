"""Action DTOs."""

from apps.sso.application.actions.dto.result import ActionResult

__all__ = ["ActionResult"]
