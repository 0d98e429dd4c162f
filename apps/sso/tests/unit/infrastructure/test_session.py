"""PostgreSQL 엔진 설정 테스트 (DB 연결 없음)."""

from apps.sso.infrastructure.persistence_postgres.session import build_engine
from apps.sso.setup.config import Settings


def test_build_engine_uses_settings() -> None:
    settings = Settings(
        database_url="postgresql+asyncpg://sso:pw@db.internal:5432/sso",
        db_pool_size=3,
    )

    engine = build_engine(settings)

    assert engine.url.host == "db.internal"
    assert engine.url.database == "sso"
    assert engine.pool.size() == 3
