# Behavior scenarios for the lazy and bulk decoders.
# "?" marks an invalid sequence in the expected output.

import pytest

from lazyutf8.core import DecodeError, LengthPolicy, decode_stream, iter_buffer


def run_stream(data, policy=LengthPolicy.STRICT):
    return ["?" if outcome is DecodeError.INVALID else outcome for outcome in decode_stream(data, policy)]


def run_buffer(data, policy=LengthPolicy.STRICT):
    out = []
    for _, outcome, _ in iter_buffer(data, policy):
        out.append("?" if isinstance(outcome, DecodeError) else outcome)
    return out


SCENARIOS = [
    (b"", []),
    (b"\x41", ["A"]),
    (b"\xe2\x99\xa5", ["♥"]),
    (b"\xe2\x99\xa5\x41", ["♥", "A"]),
    (b"\xe2\x99", ["?"]),
    (b"\xe2\x99\x41", ["?", "A"]),
    (b"\xc1\x81", ["?"]),
    (b"\xc0", ["?"]),
    (b"\xc0\x41", ["?", "A"]),
    (b"\x80", ["?"]),
    (b"\x80\x41", ["?", "A"]),
    (b"\xfe", ["?"]),
    (b"\xfe\x41", ["?", "A"]),
    (b"\xff", ["?"]),
    (b"\xff\x41", ["?", "A"]),
]


@pytest.mark.parametrize("data,expected", SCENARIOS)
def test_stream_scenarios(data, expected):
    assert run_stream(data) == expected


@pytest.mark.parametrize("data,expected", SCENARIOS)
def test_buffer_scenarios(data, expected):
    assert run_buffer(data) == expected


def test_resync_after_every_bad_lead():
    for lead in range(0x80, 0x100):
        for policy in LengthPolicy:
            assert run_stream(bytes([lead, 0x41]), policy) == ["?", "A"], hex(lead)
            assert run_buffer(bytes([lead, 0x41]), policy) == ["?", "A"], hex(lead)


def test_truncated_three_byte_sequence_at_end():
    decoder = decode_stream(b"\xe2\x82")
    assert list(decoder) == [DecodeError.INVALID]
    assert decoder.offset == 2


def test_mixed_text_recovers_after_errors():
    data = b"caf\xc3\xa9 \xed\xa0\x80 \xf0\x9f\x98\x80\xf0\x9f\x98 ok"
    expected = ["c", "a", "f", "é", " ", "?", " ", "\U0001f600", "?", " ", "o", "k"]
    assert run_stream(data) == expected
    assert run_buffer(data) == expected


def test_valid_text_matches_builtin_decoder():
    text = "Hello, wörld! Привет ♥ 你好 \U0001f30d\U0001f30e"
    data = text.encode("utf-8")
    assert "".join(run_stream(data)) == text
    assert "".join(run_buffer(data)) == text
