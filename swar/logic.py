"""Lane-wise comparisons of eight bytes packed in a 64-bit word."""

from __future__ import annotations

MASK64 = 0xFFFF_FFFF_FFFF_FFFF

#: The high bit set in each of the eight bytes.
HIGH_BITS = 0x8080_8080_8080_8080

_NOT_HIGH = 0x7F7F_7F7F_7F7F_7F7F


def high_bit_where_less(v: int, cm: int) -> int:
    """Set 0x80 in each byte where the byte of *v* is less than that of *cm*."""
    d = ((v | HIGH_BITS) - (cm & _NOT_HIGH)) & MASK64
    x = v ^ cm
    sel = ((v & x) | (d & ~x)) & HIGH_BITS
    return (sel ^ HIGH_BITS) & HIGH_BITS


def high_bit_where_greater(v: int, cm: int) -> int:
    """Set 0x80 in each byte where the byte of *v* is greater than that of *cm*."""
    d = ((cm | HIGH_BITS) - (v & _NOT_HIGH)) & MASK64
    x = cm ^ v
    sel = ((cm & x) | (d & ~x)) & HIGH_BITS
    return (sel ^ HIGH_BITS) & HIGH_BITS


def high_bit_where_equal(v: int, cm: int) -> int:
    """Set 0x80 in each byte where the bytes of *v* and *cm* are equal."""
    x = v ^ cm
    y = ((x & _NOT_HIGH) + _NOT_HIGH) | x
    return ~y & HIGH_BITS