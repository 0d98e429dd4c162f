"""Identity Exceptions."""

from apps.sso.application.common.exceptions.base import ApplicationError


class ProviderValidationFailedError(ApplicationError):
    """프로바이더 인증 코드 검증 실패.

    만료/재사용된 코드, 프로바이더 API 오류, 네트워크 오류 등.
    코드는 일회용이므로 재시도하지 않습니다.
    """

    def __init__(self, provider: str, reason: str) -> None:
        self.provider = provider
        super().__init__(f"Provider validation failed ({provider}): {reason}")


class PersistenceFailedError(ApplicationError):
    """사용자 조회/생성 실패."""

    def __init__(self, reason: str = "Could not find or create user") -> None:
        super().__init__(reason)


class UnsupportedProviderError(ApplicationError):
    """등록되지 않은 프로바이더."""

    def __init__(self, provider: str) -> None:
        self.provider = provider
        super().__init__(f"Unsupported provider: {provider}")
