"""Runtime stream layer for readers generated from binary format descriptions."""

from ksruntime.const import VERSION
from ksruntime.errors import (
    InvalidArgument,
    InvalidSource,
    ShortRead,
    StreamError,
    UnexpectedContent,
    UnsupportedOperation,
    UnterminatedRead,
    format_hex,
)
from ksruntime.io import Stream
from ksruntime.model import Struct

__all__ = [
    'VERSION',
    'InvalidArgument',
    'InvalidSource',
    'ShortRead',
    'Stream',
    'StreamError',
    'Struct',
    'UnexpectedContent',
    'UnsupportedOperation',
    'UnterminatedRead',
    'format_hex',
]
