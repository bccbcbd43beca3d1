"""Mapping between bytes and field elements.

Field elements are stored inside share values as two little-endian bytes
because ``256`` does not fit in one byte.
"""
from __future__ import annotations

from typing import Optional

from primeshare.errors import CorruptShare, FieldError
from primeshare.field import PRIME

ELEMENT_SIZE = 2


def encode_element(value: int) -> bytes:
    if not 0 <= value < PRIME:
        raise FieldError(f"field element out of range: {value}", value=value)
    return bytes((value % 256, value // 256))


def decode_element(
    buf: bytes,
    offset: int,
    *,
    index: Optional[int] = None,
    share_position: Optional[int] = None,
) -> int:
    """Read the element stored at ``buf[offset:offset + 2]``."""

    value = buf[offset] + 256 * buf[offset + 1]
    if value >= PRIME:
        raise CorruptShare(
            f"encoded element {value} at byte {offset} is outside GF(257)",
            index=index,
            share_position=share_position,
            byte_position=offset // ELEMENT_SIZE,
        )
    return value


def byte_to_element(byte: int) -> int:
    return byte


def element_to_byte(value: int, *, byte_position: Optional[int] = None) -> int:
    # 256 is a valid element but never a constant term produced by split
    if not 0 <= value <= 255:
        raise CorruptShare(
            f"reconstructed value {value} is not a byte; shares do not belong together",
            byte_position=byte_position,
        )
    return value


__all__ = [
    "ELEMENT_SIZE",
    "encode_element",
    "decode_element",
    "byte_to_element",
    "element_to_byte",
]
