import pytest

from swar.arith import (
    absolute_difference_between_bytes,
    add_bytes_with_maximum,
    add_bytes_with_wrapping,
    average_bytes,
    count_ones_per_byte,
    reverse_each_byte,
    select_by_low_bit,
    select_larger_bytes,
    select_smaller_bytes,
    subtract_bytes_with_minimum,
    subtract_bytes_with_wrapping,
    swap_byte_halves,
)
from swar.lanes import bytes_to_lanes, dupe, lanes_to_bytes, lanes_to_int
from swar.logic import high_bit_where_greater, high_bit_where_less

LOTS_OF_BYTES = b"Allo Zorld! I am NOT yelling, but I am using SWAR!"


def _samples():
    n = 0
    while n < 0xFF_FF_FF_FF_FF:
        yield n
        n = (n * 12 + 13) // 11


def _bytes(v):
    return v.to_bytes(8, "little")


def _join(values):
    return int.from_bytes(bytes(values), "little")


@pytest.mark.parametrize(
    "a, b, want",
    [
        (0x01_10_40_FF, 0xFF_30_80_FD, 0x80_20_60_FE),
        (0x04, 0x08, 0x06),
        (0x10_DD, 0x30_FF, 0x20_EE),
        (0x0004, 0xCDEB, 0x6677),
        (0x01FE, 0xCC11, 0x6687),
    ],
)
def test_average_bytes(a, b, want):
    assert average_bytes(a, b) == want


@pytest.mark.parametrize(
    "a, b, want",
    [
        (0xFF_FE_FD, 0x01_01_01, 0xFF_FF_FE),
        (0xFD_FC_FB, 0x03_03_03, 0xFF_FF_FE),
    ],
)
def test_add_bytes_with_maximum(a, b, want):
    assert add_bytes_with_maximum(a, b) == want


@pytest.mark.parametrize(
    "a, b, want",
    [
        (0xFF_FE_FD, 0x01_01_01, 0x00_FF_FE),
        (0xFD_FC_FB, 0x03_03_03, 0x00_FF_FE),
        (0xF4_F9, 0x0F_01, 0x03_FA),
        (0xFF_0F_FF, 0x01_F0_00, 0x00_FF_FF),
    ],
)
def test_add_bytes_with_wrapping(a, b, want):
    assert add_bytes_with_wrapping(a, b) == want


def test_select_by_low_bit():
    assert select_by_low_bit(0x11_11_11_11, 0x22_22_22_22, 0x01_00_01_00) == 0x11_22_11_22


@pytest.mark.parametrize(
    "a, b, want",
    [
        (0x01_02_03_04_05_06_07_08, 0x05_04_03_02_01_00_09_0A, 0x01_02_03_02_01_00_07_08),
        (0x0000_0000_0000_0004, 0x1234_5678_90AB_CDEB, 0x0000_0000_0000_0004),
    ],
)
def test_select_smaller_bytes(a, b, want):
    assert select_smaller_bytes(a, b) == want


@pytest.mark.parametrize(
    "a, b, want",
    [
        (0x01_02_03_04_05_06_07_08, 0x05_04_03_02_01_00_09_0A, 0x05_04_03_04_05_06_09_0A),
        (0x04, 0xEB, 0xEB),
        (0x01, 0x02, 0x02),
    ],
)
def test_select_larger_bytes(a, b, want):
    assert select_larger_bytes(a, b) == want


def test_swap_byte_halves():
    assert swap_byte_halves(0xF0_F0_F0_F0_F0_F0_F0_F0) == 0x0F_0F_0F_0F_0F_0F_0F_0F


@pytest.mark.parametrize(
    "v, want",
    [
        (0x01_02_04_08_10_20_40_80, 0x80_40_20_10_08_04_02_01),
        (0b01001000_11100001_11000011_11110000, 0b00010010_10000111_11000011_00001111),
    ],
)
def test_reverse_each_byte(v, want):
    assert reverse_each_byte(v) == want


def test_count_ones_per_byte():
    assert count_ones_per_byte(0x0F_F0_55_AA_00_FF_33_CC) == 0x04_04_04_04_00_08_04_04


def test_unary_ops_against_lane_values():
    for n in _samples():
        nb = _bytes(n)
        assert swap_byte_halves(n) == _join(((x & 0x0F) << 4) | (x >> 4) for x in nb)
        assert reverse_each_byte(n) == _join(int(f"{x:08b}"[::-1], 2) for x in nb)
        assert count_ones_per_byte(n) == _join(x.bit_count() for x in nb)


def test_binary_ops_against_lane_values():
    d = 0x_01_00_01_01_00_00_01_00
    for n in _samples():
        m = n ^ 0x0000005351952B76
        pairs = list(zip(_bytes(n), _bytes(m)))
        assert select_smaller_bytes(n, m) == _join(min(x, y) for x, y in pairs)
        assert select_larger_bytes(n, m) == _join(max(x, y) for x, y in pairs)
        assert average_bytes(n, m) == _join((x + y) // 2 for x, y in pairs)
        assert absolute_difference_between_bytes(n, m) == _join(abs(x - y) for x, y in pairs)
        assert add_bytes_with_wrapping(n, m) == _join((x + y) % 256 for x, y in pairs)
        assert subtract_bytes_with_wrapping(n, m) == _join((x - y) % 256 for x, y in pairs)
        assert add_bytes_with_maximum(n, m) == _join(min(x + y, 255) for x, y in pairs)
        assert subtract_bytes_with_minimum(n, m) == _join(max(x - y, 0) for x, y in pairs)
        assert select_by_low_bit(n, m, d) == _join(
            x if flag else y for (x, y), flag in zip(pairs, _bytes(d))
        )


def test_subtract_with_wrapping_pinned():
    assert subtract_bytes_with_wrapping(0x00_10, 0x01_01) == 0xFF_FF_FF_FF_FF_FF_FF_0F & 0xFF_0F


def test_subtract_with_minimum_pinned():
    assert subtract_bytes_with_minimum(0x05_01, 0x02_03) == 0x03_00


def test_uppercase_text():
    inc = dupe(32)
    first_lower, last_lower = dupe(ord("a") - 1), dupe(ord("z") + 1)
    chunks, unused = bytes_to_lanes(LOTS_OF_BYTES)
    out_lanes = []
    for chunk in chunks:
        lowercases = high_bit_where_greater(chunk, first_lower) & high_bit_where_less(
            chunk, last_lower
        )
        all_upper = subtract_bytes_with_wrapping(chunk, inc)
        out_lanes.append(select_by_low_bit(all_upper, chunk, lowercases >> 7))
    tail = bytes(c - 32 if ord("a") <= c <= ord("z") else c for c in LOTS_OF_BYTES[unused:])
    out = lanes_to_bytes(out_lanes) + tail
    assert out == b"ALLO ZORLD! I AM NOT YELLING, BUT I AM USING SWAR!"


def test_anomaly_detection():
    threshold = dupe(2)
    average = dupe(10)
    current = lanes_to_int([10, 10, 10, 50, 10, 10, 10, 10])
    average = average_bytes(current, average)
    assert average == lanes_to_int([10, 10, 10, 30, 10, 10, 10, 10])
    delta = absolute_difference_between_bytes(current, average)
    assert delta == lanes_to_int([0, 0, 0, 20, 0, 0, 0, 0])
    assert high_bit_where_greater(delta, threshold) == 0x80 << 24