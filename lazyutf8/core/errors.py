"""Outcome markers returned by the decoders and the encoder."""

from enum import Enum


class DecodeError(Enum):
    """Non-scalar outcome of a decode step."""

    INVALID = "invalid"
    INCOMPLETE = "incomplete"
    NO_DATA = "no-data"


class EncodeError(Enum):
    """Non-written outcome of an encode call."""

    INSUFFICIENT_SPACE = "insufficient-space"
