"""Agreement Gateway Ports.

문서(agreement) 채택/철회 및 PDF 조회를 담당하는 Gateway 인터페이스입니다.
"""

from dataclasses import dataclass
from typing import Any, Protocol

from apps.sso.domain.entities.user import User
from apps.sso.domain.value_objects.intent import Intent


@dataclass(frozen=True, slots=True)
class PdfDocument:
    """PDF 바이너리."""

    body: bytes
    content_type: str = "application/pdf"


class AgreementGateway(Protocol):
    """채택/철회 Gateway 인터페이스.

    구현체:
        - HttpAgreementGateway (infrastructure/agreements/)
    """

    async def adopt(self, intent: Intent, user: User) -> dict[str, Any]:
        """문서 채택. 결과는 평탄한 key/value dict.

        Raises:
            AdoptionFailedError
        """
        ...

    async def revoke(self, intent: Intent, user: User) -> dict[str, Any]:
        """문서 채택 철회. 결과는 평탄한 key/value dict.

        Raises:
            RevocationFailedError
        """
        ...


class AgreementPdfGateway(Protocol):
    """PDF 조회 Gateway 인터페이스."""

    async def get_pdf(self, link: str | None, email: str) -> PdfDocument:
        """문서 PDF 조회.

        Raises:
            PdfGenerationFailedError
        """
        ...
