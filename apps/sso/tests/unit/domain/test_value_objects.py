"""Value Object Tests."""

from __future__ import annotations

from apps.sso.domain.enums.action import SsoAction
from apps.sso.domain.value_objects.intent import Intent


class TestSsoAction:
    """SsoAction 테스트."""

    def test_only_login_skips_reference(self) -> None:
        assert SsoAction.LOGIN.requires_reference is False
        assert SsoAction.ADOPT.requires_reference is True
        assert SsoAction.REVOKE.requires_reference is True
        assert SsoAction.PDF.requires_reference is True


class TestIntent:
    """Intent Value Object 테스트."""

    def test_with_ip_returns_copy(self) -> None:
        """with_ip는 새 Intent 반환."""
        # Arrange
        intent = Intent(action=SsoAction.ADOPT, link="doc-1")

        # Act
        attached = intent.with_ip("10.0.0.1")

        # Assert
        assert attached.ip == "10.0.0.1"
        assert intent.ip is None
        assert attached.link == "doc-1"

    def test_to_payload_drops_none_and_merges_extras(self) -> None:
        """None 값 제외, extras 병합."""
        intent = Intent(
            action=SsoAction.REVOKE,
            form_id="f1",
            ip="127.0.0.1",
            extras={"reason": "left company"},
        )

        assert intent.to_payload() == {
            "action": "revoke",
            "form_id": "f1",
            "ip": "127.0.0.1",
            "reason": "left company",
        }

    def test_to_payload_core_fields_override_extras(self) -> None:
        """extras가 핵심 필드를 덮어쓰지 않음."""
        intent = Intent(action=SsoAction.ADOPT, link="doc-1", extras={"action": "login"})

        assert intent.to_payload()["action"] == "adopt"
