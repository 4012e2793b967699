"""
Tests for string reads.
"""

from pathlib import Path

import pytest

from ksruntime.errors import ShortRead, UnterminatedRead
from ksruntime.io.stream import Stream


def test_str_eos() -> None:
    """Test decoding everything up to end of stream."""
    stream = Stream('héllo'.encode('utf-8'))
    assert stream.read_str_eos('UTF-8') == 'héllo'
    assert stream.eof()


def test_str_eos_empty() -> None:
    """Test an empty remainder decodes to an empty string."""
    assert Stream(b'').read_str_eos('ASCII') == ''


def test_str_byte_limit() -> None:
    """Test decoding a fixed number of bytes."""
    stream = Stream(b'abcdef')
    assert stream.read_str_byte_limit(3, 'ASCII') == 'abc'
    assert stream.pos() == 3


def test_str_byte_limit_utf16() -> None:
    """Test the encoding name is passed through to the codec."""
    data = 'hi'.encode('utf-16-le')
    assert Stream(data).read_str_byte_limit(4, 'UTF-16LE') == 'hi'


def test_str_byte_limit_short() -> None:
    """Test short byte-limited strings fail like read_bytes."""
    with pytest.raises(ShortRead) as exc_info:
        Stream(b'ab').read_str_byte_limit(3, 'ASCII')
    assert exc_info.value.requested == 3
    assert exc_info.value.actual == 2


def test_invalid_bytes_for_encoding() -> None:
    """Test decoding errors propagate."""
    with pytest.raises(UnicodeDecodeError):
        Stream(b'\xff').read_str_eos('ASCII')


class TestStrz:
    """Tests for terminator-delimited strings."""

    def test_consume_terminator(self):
        stream = Stream(b'ab\x00cd')
        assert stream.read_strz('ASCII', 0, False, True, True) == 'ab'
        assert stream.pos() == 3
        assert stream.read_bytes_full() == b'cd'

    def test_keep_terminator_in_stream(self):
        stream = Stream(b'ab\x00cd')
        assert stream.read_strz('ASCII', 0, False, False, True) == 'ab'
        assert stream.pos() == 2
        assert stream.read_u1() == 0

    def test_include_terminator(self):
        stream = Stream(b'ab|cd')
        assert stream.read_strz('ASCII', ord('|'), True, True, True) == 'ab|'
        assert stream.pos() == 3

    def test_include_without_consume(self):
        stream = Stream(b'ab|cd')
        assert stream.read_strz('ASCII', ord('|'), True, False, True) == 'ab|'
        assert stream.pos() == 2

    def test_terminator_first(self):
        stream = Stream(b'\x00rest')
        assert stream.read_strz('ASCII', 0, False, True, True) == ''
        assert stream.pos() == 1

    def test_no_terminator_error(self):
        stream = Stream(b'abc')
        with pytest.raises(UnterminatedRead) as exc_info:
            stream.read_strz('ASCII', 0, False, True, True)
        assert exc_info.value.terminator == 0
        assert isinstance(exc_info.value, EOFError)

    def test_no_terminator_returns_remainder(self):
        stream = Stream(b'abc')
        assert stream.read_strz('ASCII', 0, False, True, False) == 'abc'
        assert stream.eof()

    def test_at_eof_without_error(self):
        stream = Stream(b'abc')
        stream.seek(3)
        assert stream.read_strz('ASCII', 0, False, True, False) == ''

    def test_at_eof_with_error(self):
        stream = Stream(b'')
        with pytest.raises(UnterminatedRead):
            stream.read_strz('ASCII', 0, False, True, True)

    def test_decodes_multibyte_once(self):
        """Multi-byte characters are decoded from the whole run, not per byte."""
        data = 'żółw'.encode('utf-8') + b'\x00'
        assert Stream(data).read_strz('UTF-8', 0, False, True, True) == 'żółw'

    def test_consecutive_strings(self):
        stream = Stream(b'one\x00two\x00')
        assert stream.read_strz('ASCII', 0, False, True, True) == 'one'
        assert stream.read_strz('ASCII', 0, False, True, True) == 'two'
        assert stream.eof()

    def test_from_file(self, tmp_path: Path):
        path = tmp_path / 'names.bin'
        path.write_bytes(b'ab\x00cd')
        with Stream.open(path) as stream:
            assert stream.read_strz('ASCII', 0, False, False, True) == 'ab'
            assert stream.pos() == 2
            stream.read_u1()
            assert stream.read_strz('ASCII', 0, False, True, False) == 'cd'
