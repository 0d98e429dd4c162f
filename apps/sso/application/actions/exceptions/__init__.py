"""Action exceptions."""

from apps.sso.application.actions.exceptions.actions import (
    AdoptionFailedError,
    PdfGenerationFailedError,
    RevocationFailedError,
    TokenIssuanceFailedError,
)

__all__ = [
    "AdoptionFailedError",
    "RevocationFailedError",
    "PdfGenerationFailedError",
    "TokenIssuanceFailedError",
]
