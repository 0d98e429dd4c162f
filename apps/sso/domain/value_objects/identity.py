"""Identity Value Object."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class Identity:
    """프로바이더 인증 코드 교환 결과.

    profile 구조는 프로바이더마다 다르며 코어에서는 해석하지 않습니다.
    """

    email: str
    profile: dict[str, Any] = field(default_factory=dict)
