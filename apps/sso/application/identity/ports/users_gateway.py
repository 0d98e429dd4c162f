"""UsersGateway Port."""

from typing import Any, Protocol

from apps.sso.domain.entities.user import User


class UsersGateway(Protocol):
    """사용자 저장소 Gateway 인터페이스.

    구현체:
        - SqlaUsersGateway (infrastructure/persistence_postgres/)
    """

    async def check_and_create_user(self, email: str, profile: dict[str, Any]) -> User:
        """이메일로 사용자를 조회하고, 없으면 생성.

        같은 이메일로 반복 호출해도 동일한 사용자를 반환해야 합니다 (find-or-create).

        Raises:
            PersistenceFailedError: 저장소 오류
        """
        ...
