"""CSRF Tokens - masked per-form tokens backed by a session secret."""

__version__ = "1.0.0"
__license__ = "MIT"

from .config import TokenConfig, get_config, load_config
from .csrf import generate_form_token, unmask_form_token, verify_form_token
from .exceptions import DecodeError, RandomSourceError, TokenError
from .logging_config import JSONFormatter, configure_logging
from .models import CSRFFormPayload, MaskedTokenField, SecretTokenField
from .tokens import MaskedToken, SecretToken

__all__ = [
    "SecretToken",
    "MaskedToken",
    "TokenError",
    "DecodeError",
    "RandomSourceError",
    "generate_form_token",
    "unmask_form_token",
    "verify_form_token",
    "CSRFFormPayload",
    "SecretTokenField",
    "MaskedTokenField",
    "TokenConfig",
    "load_config",
    "get_config",
    "configure_logging",
    "JSONFormatter",
    "__version__",
]
