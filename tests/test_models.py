"""Tests for pydantic token fields."""

import pytest
from pydantic import BaseModel, ValidationError

from csrf_tokens.models import CSRFFormPayload, SecretTokenField
from csrf_tokens.tokens import MaskedToken, SecretToken


class SessionState(BaseModel):
    csrf_secret: SecretTokenField


def test_form_payload_parses_text():
    secret = SecretToken.new()
    text = str(MaskedToken.new(secret))

    payload = CSRFFormPayload(csrf_token=text)

    assert isinstance(payload.csrf_token, MaskedToken)
    assert payload.csrf_token.unmask() == secret
    assert payload.model_dump() == {"csrf_token": text}


def test_form_payload_accepts_token_instance():
    token = MaskedToken.new(SecretToken.new())
    assert CSRFFormPayload(csrf_token=token).csrf_token == token


@pytest.mark.parametrize("value", ["!!!", "776t3g==", 42, None])
def test_form_payload_rejects_bad_token(value):
    with pytest.raises(ValidationError):
        CSRFFormPayload(csrf_token=value)


def test_session_secret_json_round_trip():
    state = SessionState(csrf_secret=SecretToken(0xDEADBEEF))
    data = state.model_dump_json()

    assert data == '{"csrf_secret":"776t3g=="}'
    assert SessionState.model_validate_json(data).csrf_secret == SecretToken(0xDEADBEEF)


def test_json_schema_declares_string():
    schema = CSRFFormPayload.model_json_schema()
    assert schema["properties"]["csrf_token"]["type"] == "string"
    assert SessionState.model_json_schema()["properties"]["csrf_secret"]["type"] == "string"


def test_package_root_exports():
    import csrf_tokens

    assert csrf_tokens.CSRFFormPayload is CSRFFormPayload
    assert csrf_tokens.SecretTokenField is SecretTokenField
    assert callable(csrf_tokens.configure_logging)
    for name in csrf_tokens.__all__:
        assert hasattr(csrf_tokens, name)
