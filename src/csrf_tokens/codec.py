"""Fixed-width little-endian and base64 text codec for token values."""

import base64
import binascii
import logging

from csrf_tokens.exceptions import DecodeError

logger = logging.getLogger(__name__)

ALPHABET_STANDARD = "standard"
ALPHABET_URLSAFE = "urlsafe"
ALPHABETS = frozenset({ALPHABET_STANDARD, ALPHABET_URLSAFE})


def _check_alphabet(alphabet: str) -> None:
    if alphabet not in ALPHABETS:
        raise ValueError(f"Unsupported base64 alphabet: {alphabet}. Use standard or urlsafe.")


def encode_uint(value: int, width: int) -> bytes:
    """Encode an unsigned integer as exactly ``width`` little-endian bytes.

    Raises:
        ValueError: If value does not fit in ``width`` bytes
    """
    if value < 0 or value >= 1 << (8 * width):
        raise ValueError(f"Value out of range for {width}-byte unsigned integer")
    return value.to_bytes(width, "little")


def decode_uint(data: bytes, width: int) -> int:
    """Decode exactly ``width`` little-endian bytes into an unsigned integer.

    Truncated or extended buffers are rejected.

    Raises:
        DecodeError: If ``len(data) != width``
    """
    if len(data) != width:
        raise DecodeError.unexpected_length(expected=width, actual=len(data))
    return int.from_bytes(data, "little")


def encode_text(data: bytes, alphabet: str = ALPHABET_STANDARD) -> str:
    """Encode bytes as padded base64 text without line breaks.

    Args:
        data: Raw bytes
        alphabet: ``standard`` (``+/``) or ``urlsafe`` (``-_``)

    Returns:
        str: ASCII base64 text
    """
    _check_alphabet(alphabet)
    if alphabet == ALPHABET_URLSAFE:
        return base64.urlsafe_b64encode(data).decode("ascii")
    return base64.b64encode(data).decode("ascii")


def decode_text(text: str, width: int, alphabet: str = ALPHABET_STANDARD) -> bytes:
    """Decode padded base64 text that must yield exactly ``width`` bytes.

    Args:
        text: Base64 text
        width: Expected decoded length in bytes
        alphabet: ``standard`` or ``urlsafe``

    Returns:
        bytes: Decoded bytes of length ``width``

    Raises:
        DecodeError: If the text is not valid base64 or decodes to the wrong length
        TypeError: If text is not a string
    """
    _check_alphabet(alphabet)
    if not isinstance(text, str):
        raise TypeError(f"Token text must be str, not {type(text).__name__}")

    try:
        raw = text.encode("ascii")
    except UnicodeEncodeError:
        logger.debug("Rejected non-ASCII token text")
        raise DecodeError.invalid_base64("non-ASCII characters") from None

    if alphabet == ALPHABET_URLSAFE:
        # b64decode only validates the standard alphabet, so translate first
        if b"+" in raw or b"/" in raw:
            raise DecodeError.invalid_base64("characters outside the urlsafe alphabet")
        raw = raw.replace(b"-", b"+").replace(b"_", b"/")

    try:
        data = base64.b64decode(raw, validate=True)
    except binascii.Error as e:
        logger.debug(f"Base64 decode failed: {e}")
        raise DecodeError.invalid_base64(str(e)) from e

    if len(data) != width:
        logger.debug(f"Decoded token has {len(data)} bytes, expected {width}")
        raise DecodeError.unexpected_length(expected=width, actual=len(data))
    return data
