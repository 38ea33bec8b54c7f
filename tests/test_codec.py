"""Tests for the fixed-width token codec."""

import pytest

from csrf_tokens.codec import decode_text, decode_uint, encode_text, encode_uint
from csrf_tokens.exceptions import DecodeError
from csrf_tokens.tokens import SecretToken


def test_encode_uint_little_endian():
    assert encode_uint(0x01020304, 4) == b"\x04\x03\x02\x01"


def test_encode_uint_out_of_range():
    with pytest.raises(ValueError):
        encode_uint(1 << 32, 4)
    with pytest.raises(ValueError):
        encode_uint(-1, 4)


def test_decode_uint_exact_length():
    assert decode_uint(b"\x04\x03\x02\x01", 4) == 0x01020304
    with pytest.raises(DecodeError):
        decode_uint(b"\x04\x03\x02", 4)


def test_missing_padding_rejected():
    with pytest.raises(DecodeError) as exc_info:
        decode_text("776t3g", 4)
    assert exc_info.value.reason == DecodeError.INVALID_BASE64


def test_whitespace_rejected():
    with pytest.raises(DecodeError) as exc_info:
        decode_text("776t\n3g==", 4)
    assert exc_info.value.reason == DecodeError.INVALID_BASE64


def test_non_ascii_rejected():
    with pytest.raises(DecodeError) as exc_info:
        decode_text("776t3g==é", 4)
    assert exc_info.value.reason == DecodeError.INVALID_BASE64


def test_non_string_rejected():
    with pytest.raises(TypeError):
        decode_text(b"776t3g==", 4)


def test_unknown_alphabet():
    with pytest.raises(ValueError):
        encode_text(b"\x00", "base32")


class TestUrlsafeAlphabet:
    def test_encode(self):
        assert encode_text(b"\xff\xff\xff\xff") == "/////w=="
        assert encode_text(b"\xff\xff\xff\xff", "urlsafe") == "_____w=="

    def test_round_trip(self):
        token = SecretToken(0xFFFFFFFF)
        text = token.to_text("urlsafe")
        assert text == "_____w=="
        assert SecretToken.from_text(text, "urlsafe") == token

    def test_alphabets_do_not_mix(self):
        with pytest.raises(DecodeError):
            SecretToken.from_text("_____w==")
        with pytest.raises(DecodeError):
            SecretToken.from_text("/////w==", "urlsafe")
