"""Core codec modules for lazyutf8."""

from .buffer import decode_buffer, iter_buffer  # noqa: F401
from .classifier import LengthPolicy, encoded_length, sequence_length  # noqa: F401
from .encoder import encode_char, encode_code_point, len_utf8  # noqa: F401
from .errors import DecodeError, EncodeError  # noqa: F401
from .incremental import IncrementalDecoder  # noqa: F401
from .options import CodecOptions  # noqa: F401
from .stream import REPLACEMENT_CHARACTER, StreamDecoder, decode_lossy, decode_stream  # noqa: F401
from .trace import TraceLog  # noqa: F401
