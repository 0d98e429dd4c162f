"""JWT Token Service.

TokenIssuer 포트의 구현체입니다.
"""

from __future__ import annotations

import time
import uuid
from datetime import timedelta
from typing import Any

from jose import jwt
from jose.exceptions import JOSEError

from apps.sso.application.actions.exceptions import TokenIssuanceFailedError


class JwtTokenService:
    """JWT 세션 토큰 서비스.

    TokenIssuer 구현체.
    """

    def __init__(
        self,
        *,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str = "sso-service",
        audience: str = "trustlayer",
        expire_minutes: int = 60 * 24 * 7,  # 7일
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._issuer = issuer
        self._audience = audience
        self._expire = timedelta(minutes=expire_minutes)

    def _now_timestamp(self) -> int:
        """현재 UTC Unix timestamp 반환."""
        return int(time.time())

    def issue_token(self, user_id: uuid.UUID) -> str:
        """세션 토큰 발급."""
        now = self._now_timestamp()
        payload: dict[str, Any] = {
            "sub": str(user_id),
            "jti": str(uuid.uuid4()),
            "iat": now,
            "nbf": now,
            "exp": now + int(self._expire.total_seconds()),
            "iss": self._issuer,
            "aud": self._audience,
        }
        try:
            return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        except (JOSEError, ValueError, TypeError) as e:
            raise TokenIssuanceFailedError(f"Could not sign token: {e}") from e
