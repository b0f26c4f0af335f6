"""Security – Argon2id password hashing with salt and optional pepper.

Hashed credential format::

    <base64 digest>.<base64 salt>

The digest is 24 raw bytes and the salt 32 raw bytes, both encoded with the
standard base64 alphabet, which never contains the ``.`` delimiter. The pepper
is appended to the salt before key derivation and is never stored.
"""
from __future__ import annotations

import base64
import hmac
import logging
from typing import Final

from argon2.low_level import Type, hash_secret_raw

from mp_crypto.kernel.errors import CryptoError, InvalidInputError, MalformedHashError
from mp_crypto.kernel.types import Result, capture
from mp_crypto.security.spice import generate_spice

__all__ = [
    "HASH_LENGTH",
    "MEMORY_COST",
    "PARALLELISM",
    "SALT_DELIMITER",
    "SALT_LENGTH",
    "TIME_COST",
    "decode_pepper",
    "derive_hash",
    "hash_password",
    "try_verify",
    "verify",
]

logger = logging.getLogger(__name__)

SALT_DELIMITER: Final = "."
SALT_LENGTH: Final = 32
HASH_LENGTH: Final = 24

# Fixed cost parameters; callers needing stronger settings wrap this module.
TIME_COST: Final = 2
MEMORY_COST: Final = 8192  # KiB
PARALLELISM: Final = 1

# Argon2 rejects salts shorter than 8 bytes.
_MIN_SALT_LENGTH: Final = 8

Pepper = bytes | str | None


def decode_pepper(pepper: Pepper) -> bytes | None:
    """Normalise a pepper argument: bytes pass through, text is base64-decoded."""
    if pepper is None or isinstance(pepper, bytes):
        return pepper
    if isinstance(pepper, bytearray):
        return bytes(pepper)
    if isinstance(pepper, str):
        try:
            return base64.b64decode(pepper, validate=True)
        except ValueError as exc:
            raise InvalidInputError("Pepper is not valid base64", parameter="pepper", cause=exc) from exc
    raise InvalidInputError("Pepper must be bytes, base64 text or None", parameter="pepper")


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def derive_hash(password: bytes, salt: bytes, pepper: Pepper = None) -> str:
    """Deterministically hash *password* with a caller-provided *salt*.

    The Argon2id salt parameter is ``salt + pepper`` (or ``salt`` alone).
    Only *salt* is embedded in the returned credential.
    """
    if not isinstance(password, (bytes, bytearray)):
        raise InvalidInputError("Password must be bytes", parameter="password")
    if not isinstance(salt, (bytes, bytearray)):
        raise InvalidInputError("Salt must be bytes", parameter="salt")
    pepper_bytes = decode_pepper(pepper)
    peppered_salt = bytes(salt) + pepper_bytes if pepper_bytes is not None else bytes(salt)
    if len(peppered_salt) < _MIN_SALT_LENGTH:
        raise InvalidInputError(
            f"Salt and pepper must total at least {_MIN_SALT_LENGTH} bytes", parameter="salt"
        )

    digest = hash_secret_raw(
        secret=bytes(password),
        salt=peppered_salt,
        time_cost=TIME_COST,
        memory_cost=MEMORY_COST,
        parallelism=PARALLELISM,
        hash_len=HASH_LENGTH,
        type=Type.ID,
    )
    logger.debug("hash derived salt_len=%d peppered=%s", len(salt), pepper_bytes is not None)
    return _b64(digest) + SALT_DELIMITER + _b64(bytes(salt))


def _encode_password(password: str) -> bytes:
    if not isinstance(password, str):
        raise InvalidInputError("Password must be text", parameter="password")
    try:
        return password.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidInputError("Password is not encodable as UTF-8", parameter="password", cause=exc) from exc


def hash_password(password: str, pepper: Pepper = None) -> str:
    """Hash *password* with a fresh 32-byte salt and the optional *pepper*.

    Two calls with the same arguments never return the same string; compare
    credentials with :func:`verify`, never with ``==``.
    """
    secret = _encode_password(password)
    pepper_bytes = decode_pepper(pepper)
    return derive_hash(secret, generate_spice(SALT_LENGTH), pepper_bytes)


def _split_salt(hashed: str) -> bytes:
    if not hashed.isascii():
        logger.warning("malformed password hash rejected reason=non_ascii")
        raise MalformedHashError("Password hash contains non-ASCII characters")
    digest64, delimiter, salt64 = hashed.partition(SALT_DELIMITER)
    if not delimiter or not digest64 or not salt64:
        logger.warning("malformed password hash rejected reason=missing_salt")
        raise MalformedHashError()
    try:
        salt = base64.b64decode(salt64, validate=True)
    except ValueError as exc:
        logger.warning("malformed password hash rejected reason=invalid_base64")
        raise MalformedHashError("Password hash salt is not valid base64", cause=exc) from exc
    if len(salt) < _MIN_SALT_LENGTH:
        logger.warning("malformed password hash rejected reason=short_salt")
        raise MalformedHashError("Password hash salt is too short")
    return salt


def verify(hashed: str, password: str, pepper: Pepper = None) -> bool:
    """Check *password* against a stored credential produced by :func:`hash_password`.

    Returns ``False`` for a wrong password and for any pepper mismatch.

    Raises:
        MalformedHashError: *hashed* lacks the delimiter, a segment is empty,
            or the salt segment is not valid base64, or it holds non-ASCII text.
        InvalidInputError: an argument has the wrong type, the password is not
            UTF-8 encodable, or the pepper is not valid base64.
    """
    if not isinstance(hashed, str):
        raise InvalidInputError("Hashed credential must be text", parameter="hashed")
    salt = _split_salt(hashed)
    expected = derive_hash(_encode_password(password), salt, pepper)
    return hmac.compare_digest(expected.encode(), hashed.encode())


def try_verify(hashed: str, password: str, pepper: Pepper = None) -> Result[bool, CryptoError]:
    """Like :func:`verify`, but returns ``Err`` instead of raising a :class:`CryptoError`."""
    return capture(lambda: verify(hashed, password, pepper), CryptoError)
