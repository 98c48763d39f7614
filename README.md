# swar

Byte-wise operations on 64-bit integers that treat each integer as eight
unsigned 8-bit lanes. Every function works on all eight lanes at once using
plain integer arithmetic and bit masks ("SIMD within a register").

A lane word is an ordinary Python `int` in the range `0 .. 2**64 - 1`. Byte
`i` of a buffer sits in bits `8*i` to `8*i + 7` of the word (little-endian
layout). The arithmetic and comparison functions mask their results back into
64 bits.

This is a library only: it has no command-line program.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `swar.lanes` — packing and helpers

- `bytes_to_lanes(b)` — split a bytes-like object into 64-bit lanes. Returns a
  list of lanes, one per complete 8-byte chunk, and the index at which the
  leftover (fewer than eight) bytes begin.
- `lanes_to_bytes(lanes)` — join lanes back into `bytes`, eight per lane.
  Raises `ValueError` for a lane outside the 64-bit range.
- `dupe(c)` — repeat the byte value `c` in all eight lanes. Raises
  `ValueError` if `c` is not in `0 .. 255`.
- `extract_low_bits(v)` — pack the low bit of each byte of `v` into one byte;
  the low bit of byte `i` becomes bit `i`. Meaningful when only the low bit of
  each byte is set (for example a comparison result shifted right by 7).
- `int_to_lanes(i)` — the eight bytes of a word, lowest byte first.
  Raises `ValueError` outside the 64-bit range.
- `lanes_to_int(lanes)` — a word from exactly eight bytes, lowest byte first.
  Raises `ValueError` for any other length.
- `ones_positions(b)` — the positions of the set bits of a byte value, as a
  tuple in ascending order. Raises `ValueError` if `b` is not in `0 .. 255`.

Constants: `MASK64`, `LOW_BITS` (`0x0101010101010101`) and `ONES_POSITIONS`,
the precomputed table behind `ones_positions`.

### `swar.logic` — comparisons

Each returns `0x80` in every lane where the comparison holds and `0x00`
elsewhere:

- `high_bit_where_less(v, cm)`
- `high_bit_where_greater(v, cm)`
- `high_bit_where_equal(v, cm)`

Constants: `HIGH_BITS` (`0x8080808080808080`) and `MASK64`.

### `swar.arith` — per-lane arithmetic

- `add_bytes_with_wrapping(a, b)`, `add_bytes_with_maximum(a, b)` (saturates at 255)
- `subtract_bytes_with_wrapping(a, b)`, `subtract_bytes_with_minimum(a, b)` (clamps at 0)
- `absolute_difference_between_bytes(a, b)`
- `select_smaller_bytes(a, b)`, `select_larger_bytes(a, b)`
- `average_bytes(a, b)` — floor of the mean, without overflow
- `swap_byte_halves(v)` — swap the nibbles of each byte
- `reverse_each_byte(v)` — reverse the bit order within each byte
- `select_by_low_bit(a, b, mask)` — the lane from `a` where the mask lane is 1,
  otherwise the lane from `b`; each mask lane must be 0 or 1
- `count_ones_per_byte(v)` — population count per lane

## Examples

Count the spaces in a piece of text, eight bytes at a time:

```python
from swar.lanes import bytes_to_lanes, dupe
from swar.logic import high_bit_where_equal

text = b"Allo Zorld! I am NOT yelling, but I am using SWAR!"
spaces = dupe(ord(" "))

lanes, rest = bytes_to_lanes(text)
count = sum(high_bit_where_equal(lane, spaces).bit_count() for lane in lanes)
count += text[rest:].count(b" ")
print(count)  # 10
```

Find the positions of capital letters:

```python
from swar.lanes import bytes_to_lanes, dupe, extract_low_bits, ones_positions
from swar.logic import high_bit_where_greater, high_bit_where_less

text = b"Allo Zorld! I am NOT yelling, but I am using SWAR!"
lanes, rest = bytes_to_lanes(text)
positions = []
for index, lane in enumerate(lanes):
    caps = high_bit_where_greater(lane, dupe(ord("A") - 1)) & high_bit_where_less(
        lane, dupe(ord("Z") + 1)
    )
    positions += [index * 8 + p for p in ones_positions(extract_low_bits(caps >> 7))]
positions += [rest + i for i, c in enumerate(text[rest:]) if 65 <= c <= 90]
print(sum(positions))  # 291
```

Upper-case the ASCII letters of one lane:

```python
from swar.arith import select_by_low_bit, subtract_bytes_with_wrapping
from swar.lanes import dupe
from swar.logic import high_bit_where_greater, high_bit_where_less

def upper(chunk: int) -> int:
    lower = high_bit_where_greater(chunk, dupe(ord("a") - 1)) & high_bit_where_less(
        chunk, dupe(ord("z") + 1)
    )
    shifted = subtract_bytes_with_wrapping(chunk, dupe(32))
    return select_by_low_bit(shifted, chunk, lower >> 7)
```