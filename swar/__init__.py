"""Byte-wise SIMD-within-a-register operations on 64-bit integers.

Modules: ``lanes`` (packing and helpers), ``logic`` (comparisons) and
``arith`` (per-lane arithmetic).
"""

__version__ = "0.1.0"
__all__ = ["arith", "lanes", "logic"]