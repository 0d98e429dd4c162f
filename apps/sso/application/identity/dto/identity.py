"""Identity DTOs."""

from dataclasses import dataclass
from typing import Any

from apps.sso.domain.entities.user import User


@dataclass(frozen=True, slots=True)
class ResolvedIdentity:
    """인증 코드로 확인된 사용자."""

    email: str
    profile: dict[str, Any]
    user: User
