"""PostgreSQL persistence."""

from apps.sso.infrastructure.persistence_postgres.adapters.users_gateway_sqla import (
    SqlaUsersGateway,
)
from apps.sso.infrastructure.persistence_postgres.session import get_async_session

__all__ = ["SqlaUsersGateway", "get_async_session"]
