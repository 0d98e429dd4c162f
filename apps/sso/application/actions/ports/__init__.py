"""Action ports."""

from apps.sso.application.actions.ports.agreement_gateway import (
    AgreementGateway,
    AgreementPdfGateway,
    PdfDocument,
)
from apps.sso.application.actions.ports.token_issuer import TokenIssuer

__all__ = [
    "AgreementGateway",
    "AgreementPdfGateway",
    "PdfDocument",
    "TokenIssuer",
]
