"""Sequence-length classification and the tables shared by decode and encode."""

from enum import Enum
from typing import Optional, Tuple


class LengthPolicy(Enum):
    """Longest sequence a lead byte may announce."""

    STRICT = 4
    EXTENDED = 6

    @property
    def max_length(self) -> int:
        return self.value


MAX_SCALAR = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)

# Exclusive upper bound of the code points each length can carry: 7, 11, 16, 21, 26 and 31 bits.
LENGTH_LIMITS: Tuple[int, ...] = (0x80, 0x800, 0x10000, 0x200000, 0x4000000, 0x80000000)
LEADING_MARKERS: Tuple[int, ...] = (0x00, 0xC0, 0xE0, 0xF0, 0xF8, 0xFC)


def _leading_ones(byte: int) -> int:
    return 8 - (~byte & 0xFF).bit_length()


def _build_table() -> Tuple[int, ...]:
    table = []
    for byte in range(256):
        ones = _leading_ones(byte)
        if ones == 0:
            table.append(1)
        elif 2 <= ones <= 6:
            table.append(ones)
        else:
            table.append(0)
    return tuple(table)


SEQUENCE_LENGTHS: Tuple[int, ...] = _build_table()


def sequence_length(lead: int, policy: LengthPolicy = LengthPolicy.STRICT) -> int:
    """Return the total length announced by ``lead``, or 0 if it cannot start a sequence."""
    length = SEQUENCE_LENGTHS[lead]
    if length > policy.max_length:
        return 0
    return length


def payload_bits(lead: int, length: int) -> int:
    if length == 1:
        return lead
    return lead & (0x7F >> length)


def is_continuation(byte: int) -> bool:
    return byte & 0xC0 == 0x80


def encoded_length(code_point: int) -> int:
    """Return the canonical UTF-8 length of a 31-bit code point."""
    if code_point < 0:
        raise ValueError(f"Negative code point: {code_point}")
    for length, limit in enumerate(LENGTH_LIMITS, start=1):
        if code_point < limit:
            return length
    raise ValueError(f"Code point does not fit in 31 bits: {code_point:#x}")


def to_scalar(value: int, length: int) -> Optional[str]:
    """Return the scalar value for an accumulated sequence, or None if it is not one.

    Rejects surrogates, values above U+10FFFF and overlong encodings, i.e.
    sequences longer than the canonical length of ``value``.
    """
    if value > MAX_SCALAR or value in SURROGATES:
        return None
    if encoded_length(value) != length:
        return None
    return chr(value)
