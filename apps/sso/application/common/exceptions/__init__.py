"""Application Exceptions.

공통 예외만 포함합니다. 도메인별 예외는 각 패키지에서 직접 import하세요:
  - apps.sso.application.identity.exceptions.*
  - apps.sso.application.actions.exceptions.*
"""

from apps.sso.application.common.exceptions.base import (
    ApplicationError,
    MissingParameterError,
)

__all__ = ["ApplicationError", "MissingParameterError"]
