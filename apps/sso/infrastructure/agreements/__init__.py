"""Agreements API client."""

from apps.sso.infrastructure.agreements.client import HttpAgreementGateway

__all__ = ["HttpAgreementGateway"]
