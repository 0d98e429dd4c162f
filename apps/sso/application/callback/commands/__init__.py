"""Callback Commands."""

from apps.sso.application.callback.commands.callback import SsoCallbackInteractor

__all__ = ["SsoCallbackInteractor"]
