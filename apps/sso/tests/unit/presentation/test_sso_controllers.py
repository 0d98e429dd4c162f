"""SSO HTTP Controller 단위 테스트.

지휘자(SsoCallbackInteractor)와 ResponseTranslator는 실제 객체를 사용하고,
외부 시스템(프로바이더, DB, agreements, 토큰)만 Mock으로 대체합니다.
"""

from __future__ import annotations

import json
from typing import Generator
from unittest.mock import AsyncMock, MagicMock
from urllib.parse import parse_qs, urlsplit

import pytest
from fastapi.testclient import TestClient

from apps.sso.application.actions.ports import PdfDocument
from apps.sso.application.actions.services import ActionExecutor
from apps.sso.application.callback.commands import SsoCallbackInteractor
from apps.sso.application.callback.services import ResponseTranslator
from apps.sso.application.identity.exceptions import ProviderValidationFailedError
from apps.sso.application.identity.services import IdentityResolver
from apps.sso.main import app
from apps.sso.setup.config import Settings, get_settings
from apps.sso.setup.dependencies import get_sso_callback_interactor

FRONTEND_URL = "http://localhost:3000"


@pytest.fixture
def interactor(
    mock_provider_gateway: AsyncMock,
    users_gateway,
    mock_agreement_gateway: AsyncMock,
    mock_token_issuer: MagicMock,
) -> SsoCallbackInteractor:
    return SsoCallbackInteractor(
        identity_resolver=IdentityResolver(
            providers={"linkedin": mock_provider_gateway, "google": mock_provider_gateway},
            users_gateway=users_gateway,
        ),
        action_executor=ActionExecutor(
            agreement_gateway=mock_agreement_gateway,
            pdf_gateway=mock_agreement_gateway,
            token_issuer=mock_token_issuer,
        ),
        response_translator=ResponseTranslator(base_url=FRONTEND_URL),
    )


@pytest.fixture
def client(interactor: SsoCallbackInteractor) -> Generator[TestClient, None, None]:
    """의존성이 교체된 TestClient (리다이렉트 미추적)."""
    app.dependency_overrides[get_sso_callback_interactor] = lambda: interactor
    app.dependency_overrides[get_settings] = lambda: Settings(local_frontend_url=FRONTEND_URL)
    yield TestClient(app, follow_redirects=False)
    app.dependency_overrides.clear()


def _query(location: str) -> dict[str, str]:
    return {k: v[0] for k, v in parse_qs(urlsplit(location).query).items()}


class TestHealthController:
    def test_health_check(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_api_v1_health(self, client: TestClient) -> None:
        response = client.get("/api/v1/health")

        assert response.status_code == 200


class TestLinkedInCallback:
    """GET /api/v1/sso/linkedin 테스트."""

    def test_provider_error_redirects_to_fail(
        self, client: TestClient, mock_provider_gateway: AsyncMock
    ) -> None:
        """error 파라미터 → /sso-fail, 사용자 확인 없음."""
        # Act
        response = client.get(
            "/api/v1/sso/linkedin",
            params={"state": '{"action":"adopt","link":"L1"}', "error": "access_denied"},
        )

        # Assert
        assert response.status_code == 302
        assert response.headers["location"] == f"{FRONTEND_URL}/sso-fail?message=access_denied"
        mock_provider_gateway.validate_user.assert_not_awaited()

    def test_provider_error_message_is_encoded(self, client: TestClient) -> None:
        response = client.get(
            "/api/v1/sso/linkedin",
            params={"state": "{}", "error": "user cancelled&retry"},
        )

        location = response.headers["location"]
        assert location.startswith(f"{FRONTEND_URL}/sso-fail?")
        assert _query(location) == {"message": "user cancelled&retry"}

    def test_provider_error_skips_callback_dependencies(
        self, client: TestClient, interactor: SsoCallbackInteractor
    ) -> None:
        """error 경로에서는 interactor 의존성 그래프를 만들지 않음."""
        built: list[SsoCallbackInteractor] = []

        def tracking_interactor() -> SsoCallbackInteractor:
            built.append(interactor)
            return interactor

        app.dependency_overrides[get_sso_callback_interactor] = tracking_interactor

        response = client.get(
            "/api/v1/sso/linkedin",
            params={"state": '{"action":"login"}', "error": "access_denied"},
        )

        assert response.status_code == 302
        assert built == []

    def test_adopt_redirects_to_sso_success(
        self,
        client: TestClient,
        mock_agreement_gateway: AsyncMock,
        email: str,
        profile: dict,
    ) -> None:
        """ADOPT → /sso-success (결과 + email/profile/userLink)."""
        response = client.get(
            "/api/v1/sso/linkedin",
            params={"code": "abc", "state": '{"action":"adopt","link":"L1"}'},
            headers={"X-Forwarded-For": "203.0.113.7, 10.0.0.1"},
        )

        assert response.status_code == 302
        location = response.headers["location"]
        assert location.startswith(f"{FRONTEND_URL}/sso-success?")
        query = _query(location)
        assert query["adoptionId"] == "ad-1"
        assert query["email"] == email
        assert json.loads(query["profile"]) == profile
        assert query["userLink"] == "link-1"

        intent, _ = mock_agreement_gateway.adopt.await_args.args
        assert intent.link == "L1"
        assert intent.ip == "203.0.113.7"

    def test_nested_and_none_delegate_values(
        self, client: TestClient, mock_agreement_gateway: AsyncMock
    ) -> None:
        """중첩 값은 compact JSON 하나로, None 값은 생략."""
        mock_agreement_gateway.adopt.return_value = {
            "adoption": {"id": "ad-1", "parties": ["a", "b"]},
            "revokedAt": None,
        }

        response = client.get(
            "/api/v1/sso/linkedin",
            params={"code": "abc", "state": '{"action":"adopt","link":"L1"}'},
        )

        query = _query(response.headers["location"])
        assert query["adoption"] == '{"id":"ad-1","parties":["a","b"]}'
        assert "revokedAt" not in query

    def test_ipv6_loopback_is_normalized(
        self, client: TestClient, mock_agreement_gateway: AsyncMock
    ) -> None:
        client.get(
            "/api/v1/sso/linkedin",
            params={"code": "abc", "state": '{"action":"revoke","form_id":"F1"}'},
            headers={"X-Forwarded-For": "::1"},
        )

        intent, _ = mock_agreement_gateway.revoke.await_args.args
        assert intent.ip == "127.0.0.1"
        assert intent.form_id == "F1"

    def test_missing_code(self, client: TestClient) -> None:
        """error/code 모두 없음 → 400."""
        response = client.get(
            "/api/v1/sso/linkedin", params={"state": '{"action":"login"}'}
        )

        assert response.status_code == 400
        assert response.json()["code"] == "MISSING_PARAMETER"

    def test_invalid_intent(
        self, client: TestClient, mock_provider_gateway: AsyncMock
    ) -> None:
        """참조 없는 ADOPT → 400, 사용자 확인 없음."""
        response = client.get(
            "/api/v1/sso/linkedin",
            params={"code": "abc", "state": '{"action":"adopt"}'},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_INTENT"
        mock_provider_gateway.validate_user.assert_not_awaited()

    def test_malformed_state(self, client: TestClient) -> None:
        response = client.get(
            "/api/v1/sso/linkedin", params={"code": "abc", "state": "not-json"}
        )

        assert response.status_code == 400
        assert response.json()["code"] == "MALFORMED_STATE"


class TestGoogleCallback:
    """GET /api/v1/sso/google 테스트."""

    def test_login_redirects_home_with_token(
        self, client: TestClient, mock_token_issuer: MagicMock, email: str, profile: dict
    ) -> None:
        """LOGIN → /home (토큰 + email/profile/userLink)."""
        response = client.get(
            "/api/v1/sso/google", params={"code": "abc", "state": '{"action":"login"}'}
        )

        assert response.status_code == 302
        location = response.headers["location"]
        assert location.startswith(f"{FRONTEND_URL}/home?")
        query = _query(location)
        assert query["token"] == "signed-token"
        assert query["email"] == email
        assert json.loads(query["profile"]) == profile
        assert query["userLink"] == "link-1"
        mock_token_issuer.issue_token.assert_called_once()

    def test_pdf_streams_bytes(
        self, client: TestClient, mock_agreement_gateway: AsyncMock, email: str
    ) -> None:
        """PDF → application/pdf 본문 그대로."""
        pdf_bytes = b"%PDF-1.7\n\x00\xff\xfe binary"
        mock_agreement_gateway.get_pdf.return_value = PdfDocument(body=pdf_bytes)

        response = client.get(
            "/api/v1/sso/google", params={"code": "abc", "state": '{"action":"pdf","link":"L2"}'}
        )

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert response.content == pdf_bytes
        mock_agreement_gateway.get_pdf.assert_awaited_once_with("L2", email)

    def test_missing_code_is_validation_error(self, client: TestClient) -> None:
        response = client.get("/api/v1/sso/google", params={"state": '{"action":"login"}'})

        assert response.status_code == 422

    def test_provider_validation_failure(
        self, client: TestClient, mock_provider_gateway: AsyncMock
    ) -> None:
        mock_provider_gateway.validate_user.side_effect = ProviderValidationFailedError(
            "google", "invalid_grant"
        )

        response = client.get(
            "/api/v1/sso/google", params={"code": "used", "state": '{"action":"login"}'}
        )

        assert response.status_code == 502
        assert response.json()["code"] == "PROVIDER_VALIDATION_FAILED"
