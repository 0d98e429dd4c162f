"""SQLAlchemy Users Gateway.

UsersGateway 포트의 구현체입니다.
"""

from __future__ import annotations

import logging
import secrets
import uuid
from typing import TYPE_CHECKING, Any

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.exc import SQLAlchemyError

from apps.sso.application.identity.exceptions import PersistenceFailedError
from apps.sso.domain.entities.user import User
from apps.sso.infrastructure.persistence_postgres.mappings.users import users_table

if TYPE_CHECKING:
    from sqlalchemy.engine import Row
    from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)

USER_LINK_BYTES = 12


def generate_user_link() -> str:
    """사용자 공개 링크 식별자 생성."""
    return secrets.token_urlsafe(USER_LINK_BYTES)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class SqlaUsersGateway:
    """SQLAlchemy 기반 Users Gateway.

    find-or-create는 `INSERT ... ON CONFLICT DO NOTHING` 후 재조회로 처리합니다.
    같은 이메일로 동시에 첫 로그인이 들어와도 하나의 행으로 수렴합니다.
    """

    def __init__(self, session: "AsyncSession") -> None:
        self._session = session

    async def check_and_create_user(self, email: str, profile: dict[str, Any]) -> User:
        """이메일로 사용자 조회, 없으면 생성."""
        normalized = normalize_email(email)
        try:
            user = await self._get_by_email(normalized)
            if user is not None:
                return user

            stmt = (
                insert(users_table)
                .values(
                    id=uuid.uuid4(),
                    email=normalized,
                    link=generate_user_link(),
                    profile=profile or {},
                )
                .on_conflict_do_nothing()
            )
            inserted = (await self._session.execute(stmt)).rowcount
            await self._session.commit()

            user = await self._get_by_email(normalized)
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.warning(f"User lookup/create failed: {type(e).__name__}")
            raise PersistenceFailedError(f"Could not find or create user: {type(e).__name__}") from e

        if user is None:
            raise PersistenceFailedError("User was not created")

        if inserted:
            logger.info("User created", extra={"user_id": str(user.id)})
        else:
            # 동시 첫 로그인: 다른 요청이 먼저 INSERT
            logger.info("User resolved after concurrent insert", extra={"user_id": str(user.id)})
        return user

    async def _get_by_email(self, email: str) -> User | None:
        stmt = select(users_table).where(users_table.c.email == email)
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        return self._to_entity(row) if row is not None else None

    @staticmethod
    def _to_entity(row: "Row") -> User:
        mapping = row._mapping
        return User(
            id=mapping["id"],
            email=mapping["email"],
            link=mapping["link"],
            profile=dict(mapping["profile"] or {}),
            created_at=mapping["created_at"],
        )
