"""Testing support – pytest fixtures and Hypothesis strategies.

Import in your ``conftest.py``::

    pytest_plugins = ["mp_crypto.testing.fixtures"]
"""

from mp_crypto.testing.generators import (
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
