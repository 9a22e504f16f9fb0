"""Push-based decoder for input that arrives in chunks."""

from typing import List, Tuple

from .buffer import decode_buffer
from .errors import DecodeError
from .options import CodecOptions


class IncrementalDecoder:
    """Decode UTF-8 chunk by chunk with byte-accurate error spans.

    A sequence cut by a chunk boundary is held back until the next ``push``;
    ``finish`` reports whatever is still pending as one invalid unit. The
    output does not depend on where the chunk boundaries fall.
    """

    def __init__(self, options: CodecOptions = CodecOptions()) -> None:
        self.options = options
        self.byte_offset = 0
        self.errors: List[Tuple[int, int]] = []
        self.pending = bytearray()

    def push(self, chunk: bytes) -> str:
        if not chunk:
            return ""
        data = self.pending + chunk
        out = []
        pos = 0
        view = memoryview(data)

        while pos < len(view):
            outcome, consumed = decode_buffer(view[pos:], self.options.policy)
            if outcome is DecodeError.INCOMPLETE:
                break
            if outcome is DecodeError.INVALID:
                self._record_span_error(pos, pos + consumed)
                out.append(self.options.replacement)
            else:
                out.append(outcome)
            pos += consumed

        # Keep the incomplete tail; it never exceeds one sequence.
        self.byte_offset += pos
        self.pending = data[pos:]
        return "".join(out)

    def finish(self) -> str:
        if not self.pending:
            return ""
        self._record_span_error(0, len(self.pending))
        self.byte_offset += len(self.pending)
        self.pending.clear()
        return self.options.replacement

    def _record_span_error(self, local_start: int, local_end: int) -> None:
        self.errors.append((self.byte_offset + local_start, self.byte_offset + local_end))
