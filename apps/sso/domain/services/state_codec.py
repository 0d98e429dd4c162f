"""State Codec.

클라이언트가 되돌려 보낸 state 파라미터(JSON)를 Intent로 변환합니다.
state는 서명되지 않은 값이므로 구조 검증만 수행합니다.
"""

from __future__ import annotations

import json
from typing import Any

from apps.sso.domain.enums.action import SsoAction
from apps.sso.domain.exceptions.intent import InvalidIntentError, MalformedStateError
from apps.sso.domain.value_objects.intent import Intent

_RESERVED_KEYS = frozenset({"action", "link", "form_id", "ip"})


def _optional_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def parse_intent(state: str) -> Intent:
    """state 문자열을 검증된 Intent로 변환.

    Raises:
        MalformedStateError: JSON 객체가 아님
        InvalidIntentError: action 누락/미지원, 또는 link/form_id 누락
    """
    try:
        decoded = json.loads(state)
    except (TypeError, ValueError) as e:
        raise MalformedStateError() from e

    if not isinstance(decoded, dict):
        raise MalformedStateError()

    raw_action = decoded.get("action")
    try:
        action = SsoAction(raw_action)
    except ValueError:
        raise InvalidIntentError(
            "'state' param does not have a valid 'action' property "
            f"(expected one of {', '.join(a.value for a in SsoAction)})"
        ) from None

    link = _optional_str(decoded.get("link"))
    form_id = _optional_str(decoded.get("form_id"))

    if action.requires_reference and not link and not form_id:
        raise InvalidIntentError(
            f"'state' param with action '{action.value}' "
            "does not have 'link' or 'form_id' properties"
        )

    return Intent(
        action=action,
        link=link,
        form_id=form_id,
        extras={k: v for k, v in decoded.items() if k not in _RESERVED_KEYS},
    )
