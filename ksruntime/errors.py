"""Errors raised by the stream layer.

Every error derives from :class:`StreamError` and, where one fits, from the
matching builtin so that generic handlers keep working::

    StreamError
    ├── ShortRead (EOFError)
    ├── UnterminatedRead (EOFError)
    ├── UnexpectedContent
    ├── UnsupportedOperation (NotImplementedError)
    ├── InvalidSource (TypeError)
    └── InvalidArgument (ValueError)
"""

from __future__ import annotations

__all__ = [
    'InvalidArgument',
    'InvalidSource',
    'ShortRead',
    'StreamError',
    'UnexpectedContent',
    'UnsupportedOperation',
    'UnterminatedRead',
    'format_hex',
]


def format_hex(data: bytes) -> str:
    """Format bytes as space-separated uppercase hex pairs, e.g. ``'CA FE'``."""
    return ' '.join(f'{b:02X}' for b in data)


class StreamError(Exception):
    """Base class for all stream errors."""


class ShortRead(StreamError, EOFError):
    """Fewer bytes were available than requested."""

    def __init__(self, requested: int, actual: int) -> None:
        super().__init__(f'attempted to read {requested} bytes, got only {actual}')
        self.requested = requested
        self.actual = actual


class UnexpectedContent(StreamError):
    """Fixed contents did not match the expected byte sequence."""

    def __init__(self, actual: bytes, expected: bytes) -> None:
        super().__init__(
            f'Unexpected fixed contents: got {format_hex(actual)}, was waiting for {format_hex(expected)}'
        )
        self.actual = actual
        self.expected = expected


class UnterminatedRead(StreamError, EOFError):
    """End of stream reached while scanning for a terminator."""

    def __init__(self, terminator: int) -> None:
        super().__init__(f'end of stream reached, but no terminator {terminator} found')
        self.terminator = terminator


class UnsupportedOperation(StreamError, NotImplementedError):
    """Rotation requested over a group size other than one byte."""

    def __init__(self, group_size: int) -> None:
        super().__init__(f'unable to rotate group of {group_size} bytes yet')
        self.group_size = group_size


class InvalidSource(StreamError, TypeError):
    """Stream constructed from something that is neither bytes nor a binary file."""

    def __init__(self, source: object) -> None:
        self.source_type = type(source)
        super().__init__(
            f'can be initialized with a binary file object or bytes only, got {self.source_type.__name__}'
        )


class InvalidArgument(StreamError, ValueError):
    """An argument is outside the range an operation accepts."""
