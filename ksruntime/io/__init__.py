"""Binary stream reading and byte transforms."""

from ksruntime.io.process import rotate_left, xor_many, xor_one
from ksruntime.io.stream import Stream, to_signed

__all__ = ['Stream', 'rotate_left', 'to_signed', 'xor_many', 'xor_one']
