"""Conversions between byte strings and 64-bit lane words, plus lane helpers.

A lane word packs eight bytes into one unsigned 64-bit integer. Byte ``i`` of
a buffer becomes bits ``8*i`` to ``8*i + 7`` of the word, which is the
little-endian layout.
"""

from __future__ import annotations

import struct
from collections.abc import Iterable, Sequence

MASK64 = 0xFFFF_FFFF_FFFF_FFFF

#: The lowest bit set in each of the eight bytes; multiplying spreads a byte.
LOW_BITS = 0x0101_0101_0101_0101

_PACK_MASK = 0x0102_0408_1020_4080

#: For every byte value, the positions of its set bits in ascending order.
ONES_POSITIONS: tuple[tuple[int, ...], ...] = tuple(
    tuple(bit for bit in range(8) if value >> bit & 1) for value in range(256)
)


def _check_byte(value: int) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value!r}")
    return value


def _check_word(value: int) -> int:
    if not 0 <= value <= MASK64:
        raise ValueError(f"64-bit lane value out of range: {value!r}")
    return value


def bytes_to_lanes(b: bytes | bytearray | memoryview) -> tuple[list[int], int]:
    """Split *b* into 64-bit lanes.

    Returns the lanes built from every complete 8-byte chunk and the index at
    which the leftover bytes (fewer than eight) begin.
    """
    data = bytes(b)
    count = len(data) // 8
    used = count * 8
    lanes = list(struct.unpack(f"<{count}Q", data[:used]))
    return lanes, used


def lanes_to_bytes(lanes: Iterable[int]) -> bytes:
    """Join 64-bit lanes back into a byte string, eight bytes per lane."""
    words = [_check_word(lane) for lane in lanes]
    return struct.pack(f"<{len(words)}Q", *words)


def dupe(c: int) -> int:
    """Repeat the byte *c* in all eight lanes of a word."""
    return _check_byte(c) * LOW_BITS


def extract_low_bits(v: int) -> int:
    """Pack the low bit of each byte of *v* into one byte.

    The low bit of byte ``i`` becomes bit ``i`` of the result. Only the low
    bit of each byte of *v* may be set for the result to be meaningful.
    """
    return ((v * _PACK_MASK) & MASK64) >> 56


def int_to_lanes(i: int) -> bytes:
    """Return the eight bytes of the 64-bit word *i*, lowest byte first."""
    return _check_word(i).to_bytes(8, "little")


def lanes_to_int(lanes: Sequence[int] | bytes | bytearray) -> int:
    """Build a 64-bit word from exactly eight bytes, lowest byte first."""
    data = bytes(lanes)
    if len(data) != 8:
        raise ValueError(f"expected exactly 8 bytes, got {len(data)}")
    return int.from_bytes(data, "little")


def ones_positions(b: int) -> tuple[int, ...]:
    """Positions of the set bits of the byte *b*, in ascending order."""
    return ONES_POSITIONS[_check_byte(b)]