"""Config settings – CryptoSettings (pepper and encryption key from the environment).

Environment variables::

    MP_CRYPTO_PEPPER          base64 pepper appended to every password salt
    MP_CRYPTO_ENCRYPTION_KEY  base64 AES key (16, 24 or 32 bytes decoded)

Generating, storing and rotating these values is the deployment's job;
``generate_base64_spice()`` produces suitable values.
"""
from __future__ import annotations

import base64
import binascii
import dataclasses
from typing import ClassVar

from mp_crypto.config.settings.base import Settings
from mp_crypto.config.validation import InvalidSettingValueError, MissingRequiredSettingError
from mp_crypto.security.encryption import KEY_SIZES, AesCbcEncryptionProvider
from mp_crypto.security.hashing import PepperedPasswordHasher


def _decode(name: str, value: str) -> bytes:
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidSettingValueError(name, value, "not valid base64", sensitive=True) from exc


@dataclasses.dataclass
class CryptoSettings(Settings):
    """Secrets consumed by the hashing and encryption wrappers."""

    _prefix: ClassVar[str] = "MP_CRYPTO"

    pepper: str | None = dataclasses.field(default=None, repr=False)
    encryption_key: str | None = dataclasses.field(default=None, repr=False)

    def _validate(self) -> None:
        # Blank variables count as unset.
        if not self.pepper:
            self.pepper = None
        if not self.encryption_key:
            self.encryption_key = None

        if self.pepper is not None:
            _decode("pepper", self.pepper)
        if self.encryption_key is not None:
            key = _decode("encryption_key", self.encryption_key)
            if len(key) not in KEY_SIZES:
                raise InvalidSettingValueError(
                    "encryption_key",
                    self.encryption_key,
                    "must decode to 16, 24 or 32 bytes",
                    sensitive=True,
                )

    def pepper_bytes(self) -> bytes | None:
        return None if self.pepper is None else _decode("pepper", self.pepper)

    def key_bytes(self) -> bytes:
        if self.encryption_key is None:
            raise MissingRequiredSettingError(f"{self._prefix}_ENCRYPTION_KEY")
        return _decode("encryption_key", self.encryption_key)

    def password_hasher(self) -> PepperedPasswordHasher:
        return PepperedPasswordHasher(self.pepper_bytes())

    def encryption_provider(self) -> AesCbcEncryptionProvider:
        return AesCbcEncryptionProvider(self.key_bytes())


__all__ = ["CryptoSettings"]
