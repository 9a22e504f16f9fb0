"""lazyutf8 CLI entrypoint."""

import argparse
import sys
from pathlib import Path
from typing import Iterator, List, Optional

from lazyutf8.core import (
    REPLACEMENT_CHARACTER,
    CodecOptions,
    DecodeError,
    TraceLog,
    decode_stream,
    encode_char,
    encode_code_point,
    iter_buffer,
)

CHUNK_SIZE = 4096


def iter_file_bytes(path: Path, chunk_size: int = CHUNK_SIZE) -> Iterator[int]:
    with path.open("rb") as handle:
        while True:
            chunk = handle.read(chunk_size)
            if not chunk:
                return
            yield from chunk


def parse_code_point(text: str) -> int:
    """Parse ``U+XXXX``, ``0x...`` or decimal notation."""
    stripped = text.strip()
    if stripped[:2].upper() == "U+":
        return int(stripped[2:], 16)
    return int(stripped, 0)


def decode_file(args: argparse.Namespace) -> None:
    options = CodecOptions.from_names(args.policy, args.replacement)
    trace = TraceLog(Path(args.trace_log), source=args.path) if args.trace_log else None
    decoder = decode_stream(iter_file_bytes(Path(args.path)), options.policy)

    if trace:
        trace.start(options.policy.name.lower())

    start = decoder.offset
    for outcome in decoder:
        if outcome is DecodeError.INVALID:
            if trace:
                trace.invalid_span(start, decoder.offset)
            if args.fail_fast:
                sys.stdout.flush()
                print(f"invalid UTF-8 sequence at byte {start}", file=sys.stderr)
                raise SystemExit(1)
            sys.stdout.write(options.replacement)
        else:
            sys.stdout.write(outcome)
        start = decoder.offset

    if trace:
        trace.summary(decoder.offset)


def encode_values(args: argparse.Namespace) -> None:
    buffer = bytearray(6)
    for text in args.values:
        code_point = parse_code_point(text)
        if args.raw:
            written = encode_code_point(code_point, buffer)
        else:
            if not 0 <= code_point <= 0x10FFFF:
                raise ValueError(f"Not a Unicode scalar value: {text}")
            written = encode_char(chr(code_point), buffer)
        print(" ".join(f"{byte:02x}" for byte in written))


def inspect_hex(args: argparse.Namespace) -> None:
    options = CodecOptions.from_names(args.policy)
    data = bytes.fromhex(" ".join(args.hex))
    for offset, outcome, consumed in iter_buffer(data, options.policy):
        if isinstance(outcome, DecodeError):
            label = outcome.value
        else:
            label = f"U+{ord(outcome):04X}"
        print(f"{offset:>6}  {consumed}  {label}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Lazy UTF-8 codec CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    decode_parser = subparsers.add_parser("decode", help="Decode a UTF-8 file to text")
    decode_parser.add_argument("path", help="File to decode")
    decode_parser.add_argument(
        "--policy", default="strict", choices=["strict", "extended"], help="Longest accepted lead byte class"
    )
    decode_parser.add_argument(
        "--replacement", default=REPLACEMENT_CHARACTER, help="Text substituted for each invalid sequence"
    )
    decode_parser.add_argument(
        "--fail-fast", action="store_true", help="Stop with exit status 1 at the first invalid sequence"
    )
    decode_parser.add_argument("--trace-log", default="", help="Append decode events to this file")
    decode_parser.set_defaults(func=decode_file)

    encode_parser = subparsers.add_parser("encode", help="Print the UTF-8 bytes of code points")
    encode_parser.add_argument("values", nargs="+", help="Code points as U+XXXX, 0x... or decimal")
    encode_parser.add_argument(
        "--raw", action="store_true", help="Accept any 31-bit code point, using 5 and 6 byte forms"
    )
    encode_parser.set_defaults(func=encode_values)

    inspect_parser = subparsers.add_parser("inspect", help="Show how hex-encoded bytes decode")
    inspect_parser.add_argument("hex", nargs="+", help="Bytes as hex, spaces allowed")
    inspect_parser.add_argument(
        "--policy", default="strict", choices=["strict", "extended"], help="Longest accepted lead byte class"
    )
    inspect_parser.set_defaults(func=inspect_hex)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
