"""State Codec 단위 테스트."""

from __future__ import annotations

import json

import pytest

from apps.sso.domain.enums.action import SsoAction
from apps.sso.domain.exceptions import InvalidIntentError, MalformedStateError
from apps.sso.domain.services import parse_intent


class TestParseIntent:
    """parse_intent 테스트."""

    def test_login_without_link_or_form_id(self) -> None:
        """LOGIN은 link/form_id 없이도 유효."""
        intent = parse_intent('{"action":"login"}')

        assert intent.action is SsoAction.LOGIN
        assert intent.link is None
        assert intent.form_id is None

    @pytest.mark.parametrize("action", ["adopt", "revoke", "pdf"])
    def test_reference_actions_accept_link(self, action: str) -> None:
        """link가 있으면 유효."""
        intent = parse_intent(json.dumps({"action": action, "link": "doc-123"}))

        assert intent.action.value == action
        assert intent.link == "doc-123"

    @pytest.mark.parametrize("action", ["adopt", "revoke", "pdf"])
    def test_reference_actions_accept_form_id(self, action: str) -> None:
        """form_id만 있어도 유효."""
        intent = parse_intent(json.dumps({"action": action, "form_id": "f1"}))

        assert intent.form_id == "f1"
        assert intent.link is None

    @pytest.mark.parametrize("action", ["adopt", "revoke", "pdf"])
    def test_reference_actions_without_link_or_form_id(self, action: str) -> None:
        """link/form_id 모두 없으면 InvalidIntentError."""
        with pytest.raises(InvalidIntentError) as exc_info:
            parse_intent(json.dumps({"action": action}))

        assert "'link'" in exc_info.value.message
        assert "'form_id'" in exc_info.value.message

    def test_empty_link_counts_as_missing(self) -> None:
        """빈 문자열 link는 누락으로 취급."""
        with pytest.raises(InvalidIntentError):
            parse_intent('{"action":"adopt","link":""}')

    @pytest.mark.parametrize(
        "state",
        [
            '{"link":"doc-123"}',
            '{"action":"sign","link":"doc-123"}',
            '{"action":"LOGIN"}',
            '{"action":null}',
            '{"action":["login"]}',
        ],
    )
    def test_missing_or_unknown_action(self, state: str) -> None:
        """action이 없거나 지원하지 않는 값이면 InvalidIntentError."""
        with pytest.raises(InvalidIntentError) as exc_info:
            parse_intent(state)

        assert "action" in exc_info.value.message

    @pytest.mark.parametrize("state", ["", "not-json", "{action: login}", '{"action":'])
    def test_malformed_json(self, state: str) -> None:
        """JSON이 아니면 MalformedStateError."""
        with pytest.raises(MalformedStateError):
            parse_intent(state)

    @pytest.mark.parametrize("state", ['"login"', "[1, 2]", "42", "null"])
    def test_non_object_json(self, state: str) -> None:
        """JSON 객체가 아니면 MalformedStateError."""
        with pytest.raises(MalformedStateError):
            parse_intent(state)

    def test_extra_keys_are_kept(self) -> None:
        """action/link/form_id 외의 값은 extras로 보존."""
        intent = parse_intent('{"action":"adopt","link":"doc-1","signer":"ceo","ip":"6.6.6.6"}')

        assert intent.extras == {"signer": "ceo"}

    def test_client_supplied_ip_is_ignored(self) -> None:
        """state의 ip는 무시 (컨트롤러가 부착)."""
        intent = parse_intent('{"action":"login","ip":"6.6.6.6"}')

        assert intent.ip is None

    def test_numeric_identifiers_are_stringified(self) -> None:
        """숫자 식별자는 문자열로 변환."""
        intent = parse_intent('{"action":"pdf","link":123}')

        assert intent.link == "123"
