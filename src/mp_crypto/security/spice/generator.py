"""Security – cryptographically secure random "spice" (salt / pepper / IV)."""
from __future__ import annotations

import base64
import secrets

from mp_crypto.kernel.errors import InvalidInputError

__all__ = ["DEFAULT_SPICE_SIZE", "generate_base64_spice", "generate_spice"]

DEFAULT_SPICE_SIZE = 32


def generate_spice(size: int = DEFAULT_SPICE_SIZE) -> bytes:
    """Return exactly *size* bytes from the operating system CSPRNG.

    Used for per-hash salts, application peppers, encryption keys and IVs.
    Failure of the OS entropy source propagates to the caller.
    """
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise InvalidInputError("Spice size must be a positive integer", parameter="size")
    return secrets.token_bytes(size)


def generate_base64_spice(size: int = DEFAULT_SPICE_SIZE) -> str:
    """Printable (standard base64) form of :func:`generate_spice`, e.g. for a pepper in config."""
    return base64.b64encode(generate_spice(size)).decode("ascii")
