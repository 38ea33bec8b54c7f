"""Exception types raised by CSRF token operations."""

from typing import Optional


class TokenError(Exception):
    """Base class for recoverable token errors."""


class DecodeError(TokenError, ValueError):
    """Raised when token text or bytes cannot be parsed.

    The ``reason`` attribute tells the two failure causes apart:

    - ``DecodeError.INVALID_BASE64``: the text is not valid base64
    - ``DecodeError.UNEXPECTED_LENGTH``: decoding succeeded but produced the
      wrong number of bytes for the target token type
    """

    INVALID_BASE64 = "invalid_base64"
    UNEXPECTED_LENGTH = "unexpected_length"

    _MESSAGES = {
        INVALID_BASE64: "invalid base64 input",
        UNEXPECTED_LENGTH: "unexpected decoded length",
    }

    def __init__(
        self,
        reason: str,
        detail: Optional[str] = None,
        expected: Optional[int] = None,
        actual: Optional[int] = None,
    ):
        if reason not in self._MESSAGES:
            raise ValueError(f"Unknown decode error reason: {reason}")
        self.reason = reason
        self.detail = detail
        self.expected = expected
        self.actual = actual
        message = self._MESSAGES[reason]
        if expected is not None and actual is not None:
            message = f"{message}: expected {expected} bytes, got {actual}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)

    def __reduce__(self):
        # args holds the formatted message, so rebuild from the fields instead
        return (self.__class__, (self.reason, self.detail, self.expected, self.actual))

    @classmethod
    def invalid_base64(cls, detail: Optional[str] = None) -> "DecodeError":
        return cls(cls.INVALID_BASE64, detail=detail)

    @classmethod
    def unexpected_length(cls, expected: int, actual: int) -> "DecodeError":
        return cls(cls.UNEXPECTED_LENGTH, expected=expected, actual=actual)


class RandomSourceError(RuntimeError):
    """The operating system random source is unusable.

    Not a ``TokenError``: callers are not expected to recover from it.
    """
