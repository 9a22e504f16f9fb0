"""Encode one scalar value or raw code point into a caller-supplied buffer."""

from typing import Union

from .classifier import LEADING_MARKERS, LENGTH_LIMITS, SURROGATES, encoded_length
from .errors import EncodeError

EncodeOutcome = Union[memoryview, EncodeError]


def _write(value: int, dst) -> EncodeOutcome:
    length = encoded_length(value)
    # Byte view over the raw storage, whatever the item size of ``dst``.
    view = memoryview(dst).cast("B")
    if view.readonly:
        raise TypeError("Destination buffer is read-only")
    if len(view) < length:
        view.release()
        return EncodeError.INSUFFICIENT_SPACE
    for index in range(length - 1, 0, -1):
        view[index] = (value & 0x3F) | 0x80
        value >>= 6
    view[0] = value | LEADING_MARKERS[length - 1]
    return view[:length]


def len_utf8(ch: str) -> int:
    """Return the number of bytes ``ch`` occupies in UTF-8."""
    return encoded_length(_scalar_code_point(ch))


def _scalar_code_point(ch: str) -> int:
    if not isinstance(ch, str) or len(ch) != 1:
        raise TypeError(f"Expected a single character, got {ch!r}")
    code_point = ord(ch)
    if code_point in SURROGATES:
        raise ValueError(f"Surrogate U+{code_point:04X} is not a scalar value")
    return code_point


def encode_char(ch: str, dst) -> EncodeOutcome:
    """Write the UTF-8 encoding of the scalar value ``ch`` at the start of ``dst``.

    Returns the written prefix of ``dst`` as a byte ``memoryview``, or
    ``EncodeError.INSUFFICIENT_SPACE`` with ``dst`` left untouched. ``dst`` may
    have any item size; its raw bytes are written.

    The returned view holds an export of ``dst``: a ``bytearray`` cannot be
    resized until the view is released, e.g. by using it as a context manager::

        with encode_char("é", buffer) as written:
            out.write(written)
        buffer.extend(b"...")
    """
    code_point = _scalar_code_point(ch)
    return _write(code_point, dst)


def encode_code_point(code_point: int, dst) -> EncodeOutcome:
    """Write a raw 31-bit code point using the historical 1 to 6 byte forms.

    Surrogates and values above U+10FFFF are encoded as well; only scalar
    values produce bytes the decoders accept.
    """
    if not isinstance(code_point, int) or isinstance(code_point, bool):
        raise TypeError(f"Expected an int code point, got {code_point!r}")
    if not 0 <= code_point < LENGTH_LIMITS[-1]:
        raise ValueError(f"Code point out of range: {code_point:#x}")
    return _write(code_point, dst)
