"""Reversible byte transforms applied to already-read data."""

from __future__ import annotations

from ksruntime.errors import InvalidArgument, UnsupportedOperation


def xor_one(data: bytes, key: int) -> bytes:
    """XOR every byte of data with a single key byte."""
    return bytes(b ^ key for b in data)


def xor_many(data: bytes, key: bytes) -> bytes:
    """XOR data with a repeating multi-byte key."""
    key_len = len(key)
    if key_len == 0:
        raise InvalidArgument('xor key must not be empty')
    return bytes(b ^ key[i % key_len] for i, b in enumerate(data))


def rotate_left(data: bytes, amount: int, group_size: int) -> bytes:
    """Rotate each group of group_size bytes left by amount bits.

    Only single-byte groups are supported. The amount is taken modulo the
    group width, so 0 and any multiple of 8 leave the data unchanged, and
    amounts of 8 or more wrap: rotating by 9 is the same as rotating by 1.
    """
    if group_size != 1:
        raise UnsupportedOperation(group_size)

    mask = group_size * 8 - 1
    amount &= mask
    anti_amount = -amount & mask

    return bytes(((b << amount) | (b >> anti_amount)) & 0xFF for b in data)
