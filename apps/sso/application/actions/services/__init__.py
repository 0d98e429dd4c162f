"""Action services."""

from apps.sso.application.actions.services.action_executor import ActionExecutor

__all__ = ["ActionExecutor"]
