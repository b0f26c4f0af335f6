"""Testing generators – Hypothesis strategies for secrets and payloads."""
from mp_crypto.testing.generators.strategies import (
    aes_key_strategy,
    password_strategy,
    pepper_strategy,
    plaintext_strategy,
)

__all__ = [
    "aes_key_strategy",
    "password_strategy",
    "pepper_strategy",
    "plaintext_strategy",
]
