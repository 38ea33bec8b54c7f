"""Pydantic field types and schemas for CSRF tokens."""

from typing import Annotated, Any, Union

from pydantic import BaseModel, Field, PlainSerializer, PlainValidator

from csrf_tokens.tokens import MaskedToken, SecretToken


def _parse_secret_token(value: Any) -> SecretToken:
    if isinstance(value, SecretToken):
        return value
    if isinstance(value, str):
        # DecodeError is a ValueError, so pydantic reports it as a validation error
        return SecretToken.from_text(value)
    raise ValueError("SecretToken must be given as base64 text")


def _parse_masked_token(value: Any) -> MaskedToken:
    if isinstance(value, MaskedToken):
        return value
    if isinstance(value, str):
        return MaskedToken.from_text(value)
    raise ValueError("MaskedToken must be given as base64 text")


def _to_text(token: Union[SecretToken, MaskedToken]) -> str:
    return token.to_text()


SecretTokenField = Annotated[
    SecretToken,
    PlainValidator(_parse_secret_token, json_schema_input_type=str),
    PlainSerializer(_to_text, return_type=str),
]

MaskedTokenField = Annotated[
    MaskedToken,
    PlainValidator(_parse_masked_token, json_schema_input_type=str),
    PlainSerializer(_to_text, return_type=str),
]


class CSRFFormPayload(BaseModel):
    """Request model for a submitted form carrying a CSRF token."""

    csrf_token: MaskedTokenField = Field(..., description="Masked CSRF token from the form")
