"""User Entity.

ORM과 분리된 순수 도메인 엔티티입니다.
테이블 정의는 infrastructure/persistence_postgres/mappings/users.py 에 있습니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import UUID


@dataclass(frozen=True, slots=True)
class User:
    """사용자 엔티티.

    Attributes:
        id: 사용자 고유 식별자
        email: 프로바이더에서 확인된 이메일
        link: 사용자 고유 링크 식별자 (공개 URL에 사용)
        profile: 최초 가입 시 프로바이더 프로필
        created_at: 생성 시각
    """

    id: UUID
    email: str
    link: str
    profile: dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
