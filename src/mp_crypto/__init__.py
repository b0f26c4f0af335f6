"""
mp_crypto – password hashing and secret encryption primitives.

Import path convention::

    from mp_crypto.security import hash_password, verify
    from mp_crypto.security import encrypt_string, decrypt_string
    from mp_crypto.kernel.errors import MalformedHashError, DecryptionFailedError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
