"""Helpers for rendering and checking masked CSRF form tokens.

The server keeps one ``SecretToken`` per session. Every rendered form gets a
fresh ``MaskedToken`` text; on submission the text is decoded, unmasked and
compared against the stored secret.
"""

import logging
from typing import Optional

from csrf_tokens.config import TokenConfig, get_config
from csrf_tokens.exceptions import DecodeError
from csrf_tokens.tokens import MaskedToken, SecretToken

logger = logging.getLogger(__name__)


def generate_form_token(secret: SecretToken, config: Optional[TokenConfig] = None) -> str:
    """Render a freshly masked token for a hidden form field."""
    config = config or get_config()
    return MaskedToken.new(secret).to_text(config.alphabet)


def unmask_form_token(submitted: str, config: Optional[TokenConfig] = None) -> SecretToken:
    """Decode submitted form text and recover the secret it was masked from.

    Raises:
        DecodeError: If the submitted text is malformed
    """
    config = config or get_config()
    return MaskedToken.from_text(submitted, config.alphabet).unmask()


def verify_form_token(
    submitted: Optional[str], secret: SecretToken, config: Optional[TokenConfig] = None
) -> bool:
    """Check a submitted form token against the session secret.

    Args:
        submitted: Token text from the request (may be missing)
        secret: Secret stored in the session
        config: Token configuration (defaults to ``get_config()``)

    Returns:
        bool: True if the token unmasks to ``secret``, False otherwise
    """
    if not submitted:
        logger.warning(
            "CSRF token missing",
            extra={"event_type": "csrf_token_missing", "token_type": "masked"},
        )
        return False

    try:
        candidate = unmask_form_token(submitted, config)
    except (DecodeError, TypeError) as e:
        reason = getattr(e, "reason", "invalid_type")
        logger.warning(
            "CSRF token malformed. reason=%s",
            reason,
            extra={"event_type": "csrf_token_malformed", "token_type": "masked", "reason": reason},
        )
        return False

    if candidate != secret:
        logger.warning(
            "CSRF token mismatch",
            extra={"event_type": "csrf_token_mismatch", "token_type": "masked"},
        )
        return False
    return True
