"""Kernel types — public re-export surface.

Modules:
  result.py — Ok, Err, Result, capture
"""

from mp_crypto.kernel.types.result import Err, Ok, Result, capture

__all__ = ["Err", "Ok", "Result", "capture"]
