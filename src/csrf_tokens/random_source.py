"""Operating system random source for token generation."""

import logging
import secrets

from csrf_tokens.exceptions import RandomSourceError

logger = logging.getLogger(__name__)


def random_bytes(count: int) -> bytes:
    """Read ``count`` bytes from the OS CSPRNG.

    Every call goes straight to ``secrets``; no generator state is kept here.

    Raises:
        RandomSourceError: If the platform has no usable entropy source
    """
    try:
        return secrets.token_bytes(count)
    except (NotImplementedError, OSError) as e:
        logger.critical(
            "Operating system random source unavailable, refusing to create token: %s", e
        )
        raise RandomSourceError(f"Operating system random source unavailable: {e}") from e


def random_u32() -> int:
    """Return a uniformly distributed unsigned 32-bit integer."""
    return int.from_bytes(random_bytes(4), "little")
