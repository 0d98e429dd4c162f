"""Callback services."""

from apps.sso.application.callback.services.response_translator import (
    ResponseTranslator,
    encode_query,
)

__all__ = ["ResponseTranslator", "encode_query"]
