"""Binary stream with typed reads for generated format readers."""

from __future__ import annotations

import io
import struct
from pathlib import Path
from typing import BinaryIO

from ksruntime.const import OPEN_MODE, SIGN_MASK_8, SIGN_MASK_16, SIGN_MASK_32, SIGN_MASK_64
from ksruntime.errors import InvalidArgument, InvalidSource, ShortRead, UnexpectedContent, UnterminatedRead
from ksruntime.io.process import rotate_left, xor_many, xor_one
from ksruntime.log import log


def to_signed(value: int, mask: int) -> int:
    """Reinterpret an unsigned value as two's-complement using its sign bit mask."""
    return (value & ~mask) - (value & mask)


class Stream:
    """Seekable byte source with a read cursor and typed accessors.

    Wraps either an in-memory buffer (copied into a BytesIO) or an already
    open binary file object. The Stream owns the source and closes it on
    ``close()`` or when used as a context manager.
    """

    def __init__(self, source: bytes | bytearray | memoryview | BinaryIO) -> None:
        if isinstance(source, (bytes, bytearray, memoryview)):
            self._io: BinaryIO = io.BytesIO(bytes(source))
        elif isinstance(source, (io.RawIOBase, io.BufferedIOBase)):
            self._io = source
        else:
            raise InvalidSource(source)

    @classmethod
    def open(cls, path: str | Path) -> Stream:
        """Open a named file in binary mode and wrap it."""
        log.debug(f'Opening stream from {path}')
        return cls(open(path, OPEN_MODE))

    def close(self) -> None:
        """Release the underlying source."""
        if not self._io.closed:
            log.debug('Closing stream')
            self._io.close()

    @property
    def closed(self) -> bool:
        return self._io.closed

    def __enter__(self) -> Stream:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ========================================================================
    # Stream positioning
    # ========================================================================

    def eof(self) -> bool:
        """True when the cursor is at (or past) the end of the source."""
        return self._io.tell() >= self.size()

    def seek(self, offset: int) -> None:
        self._io.seek(offset)

    def pos(self) -> int:
        return self._io.tell()

    def size(self) -> int:
        """Total length of the source; the cursor is left where it was."""
        current = self._io.tell()
        end = self._io.seek(0, io.SEEK_END)
        self._io.seek(current)
        return end

    # ========================================================================
    # Integer numbers
    # ========================================================================

    # ------------------------------------------------------------------------
    # Signed
    # ------------------------------------------------------------------------

    def read_s1(self) -> int:
        """Read signed 8-bit integer."""
        return to_signed(self.read_u1(), SIGN_MASK_8)

    # Big-endian

    def read_s2be(self) -> int:
        """Read signed 16-bit integer (big-endian)."""
        return to_signed(self.read_u2be(), SIGN_MASK_16)

    def read_s4be(self) -> int:
        """Read signed 32-bit integer (big-endian)."""
        return to_signed(self.read_u4be(), SIGN_MASK_32)

    def read_s8be(self) -> int:
        """Read signed 64-bit integer (big-endian)."""
        return to_signed(self.read_u8be(), SIGN_MASK_64)

    # Little-endian

    def read_s2le(self) -> int:
        """Read signed 16-bit integer (little-endian)."""
        return to_signed(self.read_u2le(), SIGN_MASK_16)

    def read_s4le(self) -> int:
        """Read signed 32-bit integer (little-endian)."""
        return to_signed(self.read_u4le(), SIGN_MASK_32)

    def read_s8le(self) -> int:
        """Read signed 64-bit integer (little-endian)."""
        return to_signed(self.read_u8le(), SIGN_MASK_64)

    # ------------------------------------------------------------------------
    # Unsigned
    # ------------------------------------------------------------------------

    def read_u1(self) -> int:
        """Read unsigned 8-bit integer."""
        return struct.unpack('B', self.read_bytes(1))[0]

    # Big-endian

    def read_u2be(self) -> int:
        """Read unsigned 16-bit integer (big-endian)."""
        return struct.unpack('>H', self.read_bytes(2))[0]

    def read_u4be(self) -> int:
        """Read unsigned 32-bit integer (big-endian)."""
        return struct.unpack('>I', self.read_bytes(4))[0]

    def read_u8be(self) -> int:
        """Read unsigned 64-bit integer (big-endian)."""
        high, low = struct.unpack('>II', self.read_bytes(8))
        return (high << 32) | low

    # Little-endian

    def read_u2le(self) -> int:
        """Read unsigned 16-bit integer (little-endian)."""
        return struct.unpack('<H', self.read_bytes(2))[0]

    def read_u4le(self) -> int:
        """Read unsigned 32-bit integer (little-endian)."""
        return struct.unpack('<I', self.read_bytes(4))[0]

    def read_u8le(self) -> int:
        """Read unsigned 64-bit integer (little-endian)."""
        low, high = struct.unpack('<II', self.read_bytes(8))
        return (high << 32) | low

    # ========================================================================
    # Floating point numbers
    # ========================================================================

    def read_f4be(self) -> float:
        """Read 32-bit float (big-endian)."""
        return struct.unpack('>f', self.read_bytes(4))[0]

    def read_f8be(self) -> float:
        """Read 64-bit double (big-endian)."""
        return struct.unpack('>d', self.read_bytes(8))[0]

    def read_f4le(self) -> float:
        """Read 32-bit float (little-endian)."""
        return struct.unpack('<f', self.read_bytes(4))[0]

    def read_f8le(self) -> float:
        """Read 64-bit double (little-endian)."""
        return struct.unpack('<d', self.read_bytes(8))[0]

    # ========================================================================
    # Byte arrays
    # ========================================================================

    def read_bytes(self, count: int) -> bytes:
        """Read exactly count bytes, raising ShortRead if the source runs out."""
        if count < 0:
            raise InvalidArgument(f'requested invalid {count} amount of bytes')
        result = self._io.read(count)
        actual = len(result) if result else 0
        if actual < count:
            raise ShortRead(count, actual)
        return result

    def read_bytes_full(self) -> bytes:
        """Read everything from the cursor to the end of the source."""
        return self._io.read() or b''

    def ensure_fixed_contents(self, expected: bytes) -> bytes:
        """Read len(expected) bytes and check them against expected.

        A source that ends early is reported as a mismatch carrying the
        bytes that were available.
        """
        actual = self._io.read(len(expected)) or b''
        if actual != expected:
            raise UnexpectedContent(actual, bytes(expected))
        return actual

    # ========================================================================
    # Strings
    # ========================================================================

    def read_str_eos(self, encoding: str) -> str:
        """Decode all remaining bytes."""
        return self.read_bytes_full().decode(encoding)

    def read_str_byte_limit(self, count: int, encoding: str) -> str:
        """Decode exactly count bytes."""
        return self.read_bytes(count).decode(encoding)

    def read_strz(
        self,
        encoding: str,
        term: int,
        include_term: bool,
        consume_term: bool,
        eos_error: bool,
    ) -> str:
        """Read a string up to a terminator byte.

        Args:
            encoding: Codec name used to decode the collected bytes.
            term: Terminator byte value.
            include_term: Append the terminator to the result.
            consume_term: Leave the cursor after the terminator; when False
                the cursor is moved back onto it.
            eos_error: Raise UnterminatedRead if the source ends first,
                otherwise return what was collected.
        """
        result = bytearray()
        remaining = self.size() - self.pos()
        for _ in range(remaining):
            c = self._io.read(1)
            if not c:
                break
            if c[0] == term:
                if include_term:
                    result += c
                if not consume_term:
                    self._io.seek(-1, io.SEEK_CUR)
                return result.decode(encoding)
            result += c

        if eos_error:
            raise UnterminatedRead(term)
        log.debug(f'No terminator {term} before end of stream, returning {len(result)} bytes')
        return result.decode(encoding)

    # ========================================================================
    # Byte array processing
    # ========================================================================

    process_xor_one = staticmethod(xor_one)
    process_xor_many = staticmethod(xor_many)
    process_rotate_left = staticmethod(rotate_left)
