"""Action Exceptions.

각 작업 위임 대상(Delegate)의 실패 유형입니다. Executor는 이 예외를 잡지 않습니다.
"""

from apps.sso.application.common.exceptions.base import ApplicationError


class AdoptionFailedError(ApplicationError):
    """문서 채택 실패."""

    def __init__(self, reason: str = "Adoption failed") -> None:
        super().__init__(reason)


class RevocationFailedError(ApplicationError):
    """문서 채택 철회 실패."""

    def __init__(self, reason: str = "Revocation failed") -> None:
        super().__init__(reason)


class PdfGenerationFailedError(ApplicationError):
    """PDF 조회 실패."""

    def __init__(self, reason: str = "PDF generation failed") -> None:
        super().__init__(reason)


class TokenIssuanceFailedError(ApplicationError):
    """세션 토큰 발급 실패."""

    def __init__(self, reason: str = "Token issuance failed") -> None:
        super().__init__(reason)
