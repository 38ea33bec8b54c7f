"""CSRF token value objects.

``SecretToken`` is the 32-bit value kept in the server session.
``MaskedToken`` is what goes into an HTML form: a fresh 32-bit one-time pad
concatenated with the pad XOR'd against the secret, so every rendered token
looks different yet unmasks to the same secret.

Binary layout of ``MaskedToken`` (little-endian u64)::

    bytes 0-3  masked = otp ^ secret  (little-endian u32)
    bytes 4-7  otp                    (little-endian u32)
"""

import hmac
from dataclasses import dataclass

from csrf_tokens.codec import ALPHABET_STANDARD, decode_text, decode_uint, encode_text, encode_uint
from csrf_tokens.random_source import random_u32

SECRET_TOKEN_SIZE = 4
MASKED_TOKEN_SIZE = 8

_U32_MASK = 0xFFFFFFFF


def _as_bytes(data) -> bytes:
    # bytes(n) would build n zero bytes from an int
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"Token data must be bytes-like, not {type(data).__name__}")
    return bytes(data)


def _check_bits(bits: int, size: int) -> None:
    # bool is an int subclass but never a meaningful bit pattern
    if not isinstance(bits, int) or isinstance(bits, bool):
        raise TypeError(f"Token bits must be int, not {type(bits).__name__}")
    if bits < 0 or bits >= 1 << (8 * size):
        raise ValueError(f"Token bits out of range for {size * 8}-bit token")


@dataclass(frozen=True, eq=False)
class SecretToken:
    """Actual token that masked tokens are compared against.

    Meant to be stored in the server session. Compares in constant time.
    """

    bits: int

    def __post_init__(self):
        _check_bits(self.bits, SECRET_TOKEN_SIZE)

    @classmethod
    def new(cls) -> "SecretToken":
        """Create a token from the operating system random source.

        Raises:
            RandomSourceError: If the OS random source is unavailable
        """
        return cls(random_u32())

    @classmethod
    def from_bytes(cls, data: bytes) -> "SecretToken":
        """Create a token from exactly 4 little-endian bytes.

        Raises:
            DecodeError: If ``data`` is not exactly 4 bytes long
        """
        return cls(decode_uint(_as_bytes(data), SECRET_TOKEN_SIZE))

    @classmethod
    def from_text(cls, text: str, alphabet: str = ALPHABET_STANDARD) -> "SecretToken":
        """Create a token from its base64 text form.

        Raises:
            DecodeError: If text is not base64 or does not decode to 4 bytes
        """
        return cls.from_bytes(decode_text(text, SECRET_TOKEN_SIZE, alphabet))

    def to_bytes(self) -> bytes:
        """Return the 4-byte little-endian representation."""
        return encode_uint(self.bits, SECRET_TOKEN_SIZE)

    def to_text(self, alphabet: str = ALPHABET_STANDARD) -> str:
        """Return the padded base64 text of ``to_bytes()``."""
        return encode_text(self.to_bytes(), alphabet)

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return "SecretToken(<hidden>)"

    def __eq__(self, other):
        if not isinstance(other, SecretToken):
            return NotImplemented
        return hmac.compare_digest(self.to_bytes(), other.to_bytes())

    def __hash__(self):
        return hash((SecretToken, self.bits))


@dataclass(frozen=True)
class MaskedToken:
    """A token that can be used in HTML forms.

    Internally a 32-bit one-time pad (high word) concatenated with the real
    token XOR'd with that pad (low word). All data needed to recover the
    secret is present; this is obfuscation, not authentication.
    """

    bits: int

    def __post_init__(self):
        _check_bits(self.bits, MASKED_TOKEN_SIZE)

    @classmethod
    def new(cls, secret: SecretToken) -> "MaskedToken":
        """Mask ``secret`` with a fresh pad from the OS random source.

        Raises:
            RandomSourceError: If the OS random source is unavailable
        """
        return cls.mask(secret, random_u32())

    @classmethod
    def mask(cls, secret: SecretToken, otp: int) -> "MaskedToken":
        """Mask ``secret`` with the given 32-bit pad."""
        if not isinstance(secret, SecretToken):
            raise TypeError(f"secret must be SecretToken, not {type(secret).__name__}")
        _check_bits(otp, SECRET_TOKEN_SIZE)
        masked = otp ^ secret.bits
        return cls((otp << 32) | masked)

    @classmethod
    def from_bytes(cls, data: bytes) -> "MaskedToken":
        """Create a token from exactly 8 little-endian bytes.

        Raises:
            DecodeError: If ``data`` is not exactly 8 bytes long
        """
        return cls(decode_uint(_as_bytes(data), MASKED_TOKEN_SIZE))

    @classmethod
    def from_text(cls, text: str, alphabet: str = ALPHABET_STANDARD) -> "MaskedToken":
        """Create a token from its base64 text form.

        Raises:
            DecodeError: If text is not base64 or does not decode to 8 bytes
        """
        return cls.from_bytes(decode_text(text, MASKED_TOKEN_SIZE, alphabet))

    @property
    def otp(self) -> int:
        return self.bits >> 32

    @property
    def masked(self) -> int:
        return self.bits & _U32_MASK

    def unmask(self) -> SecretToken:
        """Recover the underlying ``SecretToken``."""
        return SecretToken(self.otp ^ self.masked)

    def to_bytes(self) -> bytes:
        """Return the 8-byte little-endian representation."""
        return encode_uint(self.bits, MASKED_TOKEN_SIZE)

    def to_text(self, alphabet: str = ALPHABET_STANDARD) -> str:
        """Return the padded base64 text of ``to_bytes()``."""
        return encode_text(self.to_bytes(), alphabet)

    def __str__(self) -> str:
        return self.to_text()
