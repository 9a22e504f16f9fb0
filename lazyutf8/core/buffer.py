"""Bulk decoder reading one scalar value from the front of an in-memory buffer."""

from typing import Iterator, Tuple, Union

from .classifier import LengthPolicy, is_continuation, payload_bits, sequence_length, to_scalar
from .errors import DecodeError

Outcome = Union[str, DecodeError]


def _byte_view(data) -> memoryview:
    # Raw bytes of any buffer-protocol object, whatever its item size.
    return memoryview(data).cast("B")


def decode_buffer(data, policy: LengthPolicy = LengthPolicy.STRICT) -> Tuple[Outcome, int]:
    """Decode the first scalar value of ``data``.

    Returns ``(outcome, consumed)``. ``consumed`` counts the lead byte and the
    continuation bytes that matched, which is what a caller advances by before
    decoding the rest. An empty buffer gives ``(DecodeError.NO_DATA, 0)``; a
    buffer that ends inside an otherwise well-formed sequence gives
    ``(DecodeError.INCOMPLETE, len(data))``. Buffers with wider items are read
    as their raw bytes, and ``consumed`` counts bytes, not items.
    """
    with _byte_view(data) as view:
        return _decode_view(view, policy)


def _decode_view(view: memoryview, policy: LengthPolicy) -> Tuple[Outcome, int]:
    size = len(view)
    if size == 0:
        return DecodeError.NO_DATA, 0

    lead = view[0]
    if lead < 0x80:
        return chr(lead), 1

    length = sequence_length(lead, policy)
    if length < 2:
        return DecodeError.INVALID, 1

    value = payload_bits(lead, length)
    for index in range(1, length):
        if index == size:
            return DecodeError.INCOMPLETE, size
        byte = view[index]
        if not is_continuation(byte):
            return DecodeError.INVALID, index
        value = (value << 6) | (byte & 0x3F)

    scalar = to_scalar(value, length)
    if scalar is None:
        return DecodeError.INVALID, length
    return scalar, length


def iter_buffer(data, policy: LengthPolicy = LengthPolicy.STRICT) -> Iterator[Tuple[int, Outcome, int]]:
    """Walk ``data`` unit by unit, yielding ``(offset, outcome, consumed)``."""
    view = _byte_view(data)
    offset = 0
    while offset < len(view):
        outcome, consumed = _decode_view(view[offset:], policy)
        yield offset, outcome, consumed
        offset += consumed
