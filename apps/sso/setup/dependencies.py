"""Dependency Injection Setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, AsyncGenerator

from fastapi import Depends

from apps.sso.setup.config import Settings, get_settings

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


# ============================================================
# Infrastructure Dependencies
# ============================================================


async def get_db_session() -> AsyncGenerator["AsyncSession", None]:
    """DB 세션 제공자."""
    from apps.sso.infrastructure.persistence_postgres.session import get_async_session

    async for session in get_async_session():
        yield session


# ============================================================
# Gateway Dependencies (Adapters)
# ============================================================


async def get_users_gateway(
    session: "AsyncSession" = Depends(get_db_session),
):
    """UsersGateway 제공자."""
    from apps.sso.infrastructure.persistence_postgres import SqlaUsersGateway

    return SqlaUsersGateway(session)


def get_provider_registry(settings: Settings = Depends(get_settings)):
    """OAuth ProviderRegistry 제공자."""
    from apps.sso.infrastructure.oauth import ProviderRegistry

    return ProviderRegistry(settings)


def get_agreement_gateway(settings: Settings = Depends(get_settings)):
    """AgreementGateway / AgreementPdfGateway 제공자."""
    from apps.sso.infrastructure.agreements import HttpAgreementGateway

    return HttpAgreementGateway(
        settings.agreements_api_base_url,
        timeout_seconds=settings.http_timeout_seconds,
        api_token=settings.agreements_api_token,
    )


def get_token_service(settings: Settings = Depends(get_settings)):
    """TokenIssuer 제공자."""
    from apps.sso.infrastructure.security import JwtTokenService

    return JwtTokenService(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        expire_minutes=settings.session_token_exp_minutes,
    )


# ============================================================
# Service Dependencies
# ============================================================


def get_identity_resolver(
    registry=Depends(get_provider_registry),
    users_gateway=Depends(get_users_gateway),
):
    """IdentityResolver 제공자."""
    from apps.sso.application.identity.services import IdentityResolver

    return IdentityResolver(providers=registry.gateways(), users_gateway=users_gateway)


def get_action_executor(
    agreement_gateway=Depends(get_agreement_gateway),
    token_service=Depends(get_token_service),
):
    """ActionExecutor 제공자."""
    from apps.sso.application.actions.services import ActionExecutor

    return ActionExecutor(
        agreement_gateway=agreement_gateway,
        pdf_gateway=agreement_gateway,
        token_issuer=token_service,
    )


def get_response_translator(settings: Settings = Depends(get_settings)):
    """ResponseTranslator 제공자 (기본 오리진 주입)."""
    from apps.sso.application.callback.services import ResponseTranslator

    return ResponseTranslator(base_url=settings.frontend_url)


# ============================================================
# Use Case Dependencies
# ============================================================


async def get_sso_callback_interactor(
    identity_resolver=Depends(get_identity_resolver),
    action_executor=Depends(get_action_executor),
    response_translator=Depends(get_response_translator),
):
    """SsoCallbackInteractor 제공자."""
    from apps.sso.application.callback.commands import SsoCallbackInteractor

    return SsoCallbackInteractor(
        identity_resolver=identity_resolver,
        action_executor=action_executor,
        response_translator=response_translator,
    )
