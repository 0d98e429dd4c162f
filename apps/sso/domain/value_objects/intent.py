"""Intent Value Object."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from apps.sso.domain.enums.action import SsoAction


@dataclass(frozen=True, slots=True)
class Intent:
    """state 파라미터에서 해석된 작업 의도.

    Attributes:
        action: 수행할 작업
        link: 대상 문서 링크 (ADOPT/REVOKE/PDF)
        form_id: 대상 폼 ID (link 대체)
        ip: 요청자 IP (파싱 이후 컨트롤러가 채움)
        extras: action/link/form_id 외에 state에 담겨 온 값
    """

    action: SsoAction
    link: str | None = None
    form_id: str | None = None
    ip: str | None = None
    extras: dict[str, Any] = field(default_factory=dict)

    def with_ip(self, ip: str | None) -> "Intent":
        return replace(self, ip=ip)

    def to_payload(self) -> dict[str, Any]:
        """협력 서비스로 전달할 dict 표현."""
        payload: dict[str, Any] = dict(self.extras)
        payload.update(
            {
                "action": self.action.value,
                "link": self.link,
                "form_id": self.form_id,
                "ip": self.ip,
            }
        )
        return {key: value for key, value in payload.items() if value is not None}
