"""Configuration management for CSRF token rendering."""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from csrf_tokens.codec import ALPHABET_STANDARD, ALPHABETS

# Load environment variables
load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Parse boolean from environment variable."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class TokenConfig:
    """Token text and logging configuration."""

    alphabet: str = ALPHABET_STANDARD  # standard or urlsafe
    log_level: str = "INFO"
    log_json: bool = False

    def __post_init__(self):
        """Validate token configuration."""
        if self.alphabet not in ALPHABETS:
            raise ValueError(
                f"Unsupported CSRF_TOKEN_ALPHABET: {self.alphabet}. Use standard or urlsafe."
            )


def load_config() -> TokenConfig:
    """Load configuration from environment variables.

    Returns:
        TokenConfig: Token configuration

    Raises:
        ValueError: If configuration is invalid
    """
    return TokenConfig(
        alphabet=os.getenv("CSRF_TOKEN_ALPHABET", ALPHABET_STANDARD).strip().lower(),
        log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper(),
        log_json=_env_bool("LOG_JSON", False),
    )


# Global config instance (loaded on first use)
_config_instance: Optional[TokenConfig] = None


def get_config() -> TokenConfig:
    """Get the global configuration instance.

    Returns:
        TokenConfig: The token configuration
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = load_config()
    return _config_instance


def reset_config() -> None:
    """Drop the cached configuration so the next ``get_config()`` reloads it."""
    global _config_instance
    _config_instance = None
