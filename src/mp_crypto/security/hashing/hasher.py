"""Security – PepperedPasswordHasher (binds one pepper to the hashing functions)."""
from __future__ import annotations

import dataclasses

from mp_crypto.kernel.security import PasswordHasher
from mp_crypto.security.hashing.argon2id import decode_pepper, hash_password, verify

__all__ = ["PepperedPasswordHasher"]


@dataclasses.dataclass(frozen=True)
class PepperedPasswordHasher(PasswordHasher):
    """Immutable :class:`PasswordHasher` holding an application pepper.

    Safe to share between threads; every call goes through the stateless
    functions in :mod:`mp_crypto.security.hashing.argon2id`.
    """

    pepper: bytes | None = dataclasses.field(default=None, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pepper", decode_pepper(self.pepper))

    @classmethod
    def from_base64(cls, pepper: str) -> PepperedPasswordHasher:
        return cls(decode_pepper(pepper))

    def hash(self, password: str) -> str:
        return hash_password(password, self.pepper)

    def verify(self, password: str, hashed: str) -> bool:
        return verify(hashed, password, self.pepper)
