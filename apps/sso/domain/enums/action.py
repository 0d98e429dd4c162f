"""SSO Action Enum."""

from enum import Enum


class SsoAction(str, Enum):
    """콜백 이후 수행할 작업.

    state 파라미터의 `action` 값과 1:1로 대응합니다.
    """

    ADOPT = "adopt"
    REVOKE = "revoke"
    PDF = "pdf"
    LOGIN = "login"

    @property
    def requires_reference(self) -> bool:
        """link 또는 form_id 가 필요한 작업인지 여부."""
        return self is not SsoAction.LOGIN
