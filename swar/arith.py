"""Lane-wise arithmetic and bit tricks on eight bytes packed in a 64-bit word."""

from __future__ import annotations

from .logic import HIGH_BITS, MASK64

_NOT_HIGH = 0x7F7F_7F7F_7F7F_7F7F


def _not(x: int) -> int:
    return x ^ MASK64


def _borrow_mask(a: int, b: int) -> int:
    d = (a - b) & MASK64
    borrow = ((_not(a) & b) | ((_not(a) | b) & d)) & HIGH_BITS
    return (borrow >> 7) * 0xFF


def subtract_bytes_with_wrapping(a: int, b: int) -> int:
    """Subtract each byte of *b* from that of *a*, wrapping modulo 256."""
    return (((a | HIGH_BITS) - (b & _NOT_HIGH)) ^ ((a ^ _not(b)) & HIGH_BITS)) & MASK64


def subtract_bytes_with_minimum(a: int, b: int) -> int:
    """Subtract each byte of *b* from that of *a*, clamping at zero."""
    diff = subtract_bytes_with_wrapping(a, b)
    bo = ((_not(a) & b) | ((_not(a) | b) & diff)) & HIGH_BITS
    return diff & _not((bo >> 7) * 0xFF)


def add_bytes_with_wrapping(a: int, b: int) -> int:
    """Add the bytes of *a* and *b*, wrapping modulo 256."""
    total = (a & _NOT_HIGH) + (b & _NOT_HIGH)
    return (total ^ ((a ^ b) & HIGH_BITS)) & MASK64


def add_bytes_with_maximum(a: int, b: int) -> int:
    """Add the bytes of *a* and *b*, clamping at 255."""
    total = add_bytes_with_wrapping(a, b)
    carry = ((a & b) | ((a | b) & _not(total))) & HIGH_BITS
    return (total | (carry >> 7) * 0xFF) & MASK64


def absolute_difference_between_bytes(a: int, b: int) -> int:
    """Return ``|a - b|`` for each byte."""
    mask = _borrow_mask(a, b)
    larger = (a & _not(mask)) | (b & mask)
    smaller = (a & mask) | (b & _not(mask))
    return subtract_bytes_with_wrapping(larger, smaller)


def select_smaller_bytes(a: int, b: int) -> int:
    """Return the smaller of the two bytes in each lane."""
    mask = _borrow_mask(a, b)
    return ((a & mask) | (b & _not(mask))) & MASK64


def select_larger_bytes(a: int, b: int) -> int:
    """Return the larger of the two bytes in each lane."""
    mask = _borrow_mask(a, b)
    return ((a & _not(mask)) | (b & mask)) & MASK64


def average_bytes(a: int, b: int) -> int:
    """Return ``(a + b) // 2`` for each byte, without overflow."""
    common = a & b
    diff = (a ^ b) & 0xFEFE_FEFE_FEFE_FEFE
    return (common + (diff >> 1)) & MASK64


def swap_byte_halves(v: int) -> int:
    """Swap the high and low nibble of each byte."""
    lo = v & 0x0F0F_0F0F_0F0F_0F0F
    hi = v & 0xF0F0_F0F0_F0F0_F0F0
    return ((lo << 4) | (hi >> 4)) & MASK64


def reverse_each_byte(v: int) -> int:
    """Reverse the bit order within each byte."""
    x = ((v >> 1) & 0x5555_5555_5555_5555) | ((v & 0x5555_5555_5555_5555) << 1)
    x = ((x >> 2) & 0x3333_3333_3333_3333) | ((x & 0x3333_3333_3333_3333) << 2)
    x = ((x >> 4) & 0x0F0F_0F0F_0F0F_0F0F) | ((x & 0x0F0F_0F0F_0F0F_0F0F) << 4)
    return x & MASK64


def select_by_low_bit(a: int, b: int, mask: int) -> int:
    """Pick the byte of *a* where the byte of *mask* is 1, else that of *b*.

    Each byte of *mask* must be 0 or 1.
    """
    byte_mask = (mask * 0xFF) & MASK64
    return ((a & byte_mask) | (b & _not(byte_mask))) & MASK64


def count_ones_per_byte(v: int) -> int:
    """Count the set bits of each byte, leaving the count in that byte."""
    m1 = v - ((v >> 1) & 0x5555_5555_5555_5555)
    m2 = (m1 & 0x3333_3333_3333_3333) + ((m1 >> 2) & 0x3333_3333_3333_3333)
    return (m2 + (m2 >> 4)) & 0x0F0F_0F0F_0F0F_0F0F