"""Security – random spice generation."""
from mp_crypto.security.spice.generator import (
    DEFAULT_SPICE_SIZE,
    generate_base64_spice,
    generate_spice,
)

__all__ = ["DEFAULT_SPICE_SIZE", "generate_base64_spice", "generate_spice"]
