"""Intent Exceptions.

state 파라미터 해석 과정에서 발생하는 클라이언트 입력 오류입니다.
"""

from apps.sso.domain.exceptions.base import DomainError


class MalformedStateError(DomainError):
    """state 파라미터가 JSON 객체로 해석되지 않음."""

    def __init__(self, reason: str = "'state' param is not a valid JSON object") -> None:
        super().__init__(reason)


class InvalidIntentError(DomainError):
    """state 파라미터에 필요한 속성이 없음."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
