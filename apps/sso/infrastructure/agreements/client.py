"""Agreements API Client.

AgreementGateway / AgreementPdfGateway 포트의 구현체입니다.
문서 채택(adoption), 철회(revocation), PDF 조회는 agreements 서비스가 담당합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable
from urllib.parse import quote

import httpx

from apps.sso.application.actions.exceptions import (
    AdoptionFailedError,
    PdfGenerationFailedError,
    RevocationFailedError,
)
from apps.sso.application.actions.ports import PdfDocument
from apps.sso.application.common.exceptions import ApplicationError

if TYPE_CHECKING:
    from apps.sso.domain.entities.user import User
    from apps.sso.domain.value_objects.intent import Intent

logger = logging.getLogger(__name__)

ADOPTIONS_PATH = "/adoptions"
REVOCATIONS_PATH = "/revocations"
PDF_PATH_TEMPLATE = "/agreements/{link}/pdf"


class HttpAgreementGateway:
    """httpx 기반 agreements 서비스 클라이언트."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float,
        api_token: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._api_token = api_token
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        if not self._api_token:
            return {}
        return {"Authorization": f"Bearer {self._api_token}"}

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            timeout=self._timeout,
            headers=self._headers(),
            transport=self._transport,
        )

    @staticmethod
    def _body(intent: "Intent", user: "User") -> dict[str, Any]:
        return {
            **intent.to_payload(),
            "user": {"id": str(user.id), "email": user.email, "link": user.link},
        }

    async def adopt(self, intent: "Intent", user: "User") -> dict[str, Any]:
        """문서 채택."""
        return await self._post_action(ADOPTIONS_PATH, intent, user, AdoptionFailedError)

    async def revoke(self, intent: "Intent", user: "User") -> dict[str, Any]:
        """문서 채택 철회."""
        return await self._post_action(REVOCATIONS_PATH, intent, user, RevocationFailedError)

    async def get_pdf(self, link: str | None, email: str) -> PdfDocument:
        """문서 PDF 조회."""
        if not link:
            raise PdfGenerationFailedError("'link' is required to fetch a PDF")

        path = PDF_PATH_TEMPLATE.format(link=quote(link, safe=""))
        try:
            async with self._client() as client:
                response = await client.get(path, params={"email": email})
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(f"Agreements PDF error: {e.response.status_code}")
            raise PdfGenerationFailedError(
                f"Agreements API error: {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning(f"Agreements PDF request failed: {e}")
            raise PdfGenerationFailedError(str(e)) from e

        return PdfDocument(body=response.content)

    async def _post_action(
        self,
        path: str,
        intent: "Intent",
        user: "User",
        error_cls: Callable[[str], ApplicationError],
    ) -> dict[str, Any]:
        try:
            async with self._client() as client:
                response = await client.post(path, json=self._body(intent, user))
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(f"Agreements API error ({path}): {e.response.status_code}")
            raise error_cls(f"Agreements API error: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.warning(f"Agreements request failed ({path}): {e}")
            raise error_cls(str(e)) from e
        except ValueError as e:
            raise error_cls("Agreements API returned invalid JSON") from e

        if not isinstance(payload, dict):
            raise error_cls("Agreements API returned a non-object result")
        return payload
