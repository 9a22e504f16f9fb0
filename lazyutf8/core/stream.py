"""Lazy decoder pulling one scalar value at a time from a byte source."""

from typing import Iterable, Iterator, Optional, Union

from .classifier import LengthPolicy, is_continuation, payload_bits, sequence_length, to_scalar
from .errors import DecodeError

REPLACEMENT_CHARACTER = "\ufffd"

Outcome = Union[str, DecodeError]


class StreamDecoder:
    """Iterate over the characters an iterable of bytes represents as UTF-8.

    Each step yields a one-character ``str`` or ``DecodeError.INVALID``. A byte
    that cannot continue the current sequence is left in place for the next
    step, so decoding resumes at the next sequence boundary after an error.
    """

    def __init__(self, source: Iterable[int], policy: LengthPolicy = LengthPolicy.STRICT) -> None:
        self.policy = policy
        self.offset = 0
        self._source: Iterator[int] = iter(source)
        self._lookahead: Optional[int] = None

    def __iter__(self) -> "StreamDecoder":
        return self

    def _peek(self) -> Optional[int]:
        if self._lookahead is None:
            byte = next(self._source, None)
            if byte is not None and not 0 <= byte <= 0xFF:
                raise ValueError(f"Byte value out of range at offset {self.offset}: {byte}")
            self._lookahead = byte
        return self._lookahead

    def _take(self) -> Optional[int]:
        byte = self._peek()
        if byte is not None:
            self._lookahead = None
            self.offset += 1
        return byte

    def __next__(self) -> Outcome:
        lead = self._take()
        if lead is None:
            raise StopIteration
        if lead < 0x80:
            return chr(lead)

        length = sequence_length(lead, self.policy)
        if length < 2:
            return DecodeError.INVALID

        value = payload_bits(lead, length)
        for _ in range(length - 1):
            byte = self._peek()
            if byte is None or not is_continuation(byte):
                return DecodeError.INVALID
            self._take()
            value = (value << 6) | (byte & 0x3F)

        scalar = to_scalar(value, length)
        if scalar is None:
            return DecodeError.INVALID
        return scalar


def decode_stream(source: Iterable[int], policy: LengthPolicy = LengthPolicy.STRICT) -> StreamDecoder:
    """Decode ``source`` lazily."""
    return StreamDecoder(source, policy)


def decode_lossy(
    source: Iterable[int],
    replacement: str = REPLACEMENT_CHARACTER,
    policy: LengthPolicy = LengthPolicy.STRICT,
) -> str:
    """Decode ``source`` to a string, substituting ``replacement`` for each invalid unit."""
    return "".join(
        replacement if outcome is DecodeError.INVALID else outcome
        for outcome in StreamDecoder(source, policy)
    )
