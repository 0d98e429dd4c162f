"""Error Translators.

도메인/애플리케이션 예외를 HTTP 상태 코드로 변환합니다.
"""

from apps.sso.application.actions.exceptions import (
    AdoptionFailedError,
    PdfGenerationFailedError,
    RevocationFailedError,
    TokenIssuanceFailedError,
)
from apps.sso.application.common.exceptions import ApplicationError, MissingParameterError
from apps.sso.application.identity.exceptions import (
    PersistenceFailedError,
    ProviderValidationFailedError,
    UnsupportedProviderError,
)
from apps.sso.domain.exceptions import DomainError, InvalidIntentError, MalformedStateError

# 구체 타입이 먼저 매칭되어야 함
_ERROR_TABLE: tuple[tuple[type[Exception], int, str], ...] = (
    (MalformedStateError, 400, "MALFORMED_STATE"),
    (InvalidIntentError, 400, "INVALID_INTENT"),
    (MissingParameterError, 400, "MISSING_PARAMETER"),
    (UnsupportedProviderError, 404, "UNSUPPORTED_PROVIDER"),
    (ProviderValidationFailedError, 502, "PROVIDER_VALIDATION_FAILED"),
    (PersistenceFailedError, 503, "PERSISTENCE_FAILED"),
    (AdoptionFailedError, 502, "ADOPTION_FAILED"),
    (RevocationFailedError, 502, "REVOCATION_FAILED"),
    (PdfGenerationFailedError, 502, "PDF_GENERATION_FAILED"),
    (TokenIssuanceFailedError, 500, "TOKEN_ISSUANCE_FAILED"),
    (DomainError, 400, "DOMAIN_ERROR"),
    (ApplicationError, 400, "APPLICATION_ERROR"),
)


def translate_error(exc: Exception) -> tuple[int, str]:
    """예외를 (status_code, code) 튜플로 변환.

    Returns:
        (HTTP 상태 코드, 에러 코드)
    """
    for error_type, status_code, code in _ERROR_TABLE:
        if isinstance(exc, error_type):
            return status_code, code
    return 500, "INTERNAL_ERROR"
