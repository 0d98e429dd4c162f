"""TokenIssuer Port."""

from typing import Protocol
from uuid import UUID


class TokenIssuer(Protocol):
    """세션 토큰 발급 인터페이스.

    구현체:
        - JwtTokenService (infrastructure/security/)
    """

    def issue_token(self, user_id: UUID) -> str:
        """사용자 세션 토큰 발급 (로컬 서명, 네트워크 호출 없음).

        Raises:
            TokenIssuanceFailedError
        """
        ...
