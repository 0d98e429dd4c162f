"""PostgreSQL Session Management.

엔진/세션 팩토리는 프로세스당 하나이며 첫 요청 시 생성됩니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from apps.sso.setup.config import get_settings

if TYPE_CHECKING:
    from apps.sso.setup.config import Settings

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def build_engine(settings: "Settings") -> AsyncEngine:
    """설정(SSO_DATABASE_URL, SSO_DB_POOL_*)으로 AsyncEngine 생성."""
    return create_async_engine(
        settings.database_url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_recycle=settings.db_pool_recycle_seconds,
        pool_pre_ping=True,
        echo=settings.db_echo,
    )


def _session_factory_or_create() -> async_sessionmaker[AsyncSession]:
    global _engine, _session_factory
    if _session_factory is None:
        _engine = build_engine(get_settings())
        _session_factory = async_sessionmaker(
            _engine,
            expire_on_commit=False,
            autoflush=False,
        )
    return _session_factory


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """요청 단위 세션 (FastAPI Depends)."""
    async with _session_factory_or_create()() as session:
        yield session


async def dispose_engine() -> None:
    """커넥션 풀 정리 (lifespan 종료 시)."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None
