"""Action Result DTO."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from apps.sso.application.actions.ports.agreement_gateway import PdfDocument


@dataclass(frozen=True, slots=True)
class ActionResult:
    """작업 실행 결과.

    요청 한 번 동안만 존재하며 저장되지 않습니다.
    PDF 작업은 document, 나머지 작업은 fields를 채웁니다.
    """

    fields: dict[str, Any] = field(default_factory=dict)
    document: PdfDocument | None = None

    @classmethod
    def of_fields(cls, fields: dict[str, Any] | None) -> "ActionResult":
        return cls(fields=dict(fields or {}))

    @classmethod
    def of_document(cls, document: PdfDocument) -> "ActionResult":
        return cls(document=document)
