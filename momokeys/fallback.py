# ------------------------------------------------------------
# 🛟 Local credential generation (used when MoMo is unreachable)
# ------------------------------------------------------------
import logging
import secrets
import uuid

log = logging.getLogger(__name__)

API_KEY_BYTES = 16  # 16 bytes -> 32 hex characters, same shape as a real MoMo key


class EntropyFailure(SystemExit):
    """
    The OS random source is unavailable.

    Derives from SystemExit so no `except Exception` on the way up (Django's
    request handler included) can turn it into a degraded response.
    """


def _random_bytes(n):
    try:
        return secrets.token_bytes(n)
    except (NotImplementedError, OSError) as e:
        log.critical("Secure random source unavailable, refusing to generate credentials: %s", e)
        raise EntropyFailure(f"secure random source unavailable: {e}") from e


def generate_api_user() -> str:
    """A fresh UUID4, shaped like the X-Reference-Id MoMo expects."""
    return str(uuid.UUID(bytes=_random_bytes(16), version=4))


def generate_api_key() -> str:
    return _random_bytes(API_KEY_BYTES).hex()
