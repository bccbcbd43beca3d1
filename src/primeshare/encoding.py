"""Text transport format for shares: ``"<index>:<lowercase hex>"``."""
from __future__ import annotations

import re
from typing import Iterable, List, Optional

from primeshare.errors import InvalidEncodedShare
from primeshare.share import Share
from primeshare.validation import MAX_SHARES

_INDEX_RE = re.compile(r"[0-9]+")
_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})+")


def encode_share(share: Share) -> str:
    return f"{share.index}:{share.value.hex()}"


def decode_share(text: str, *, share_position: Optional[int] = None) -> Share:
    """Parse one encoded share; raise :class:`InvalidEncodedShare` on bad input."""

    def fail(reason: str) -> InvalidEncodedShare:
        where = f" at position {share_position}" if share_position is not None else ""
        return InvalidEncodedShare(
            f"invalid encoded share{where}: {reason}", text=text, share_position=share_position
        )

    if not text:
        raise fail("empty string")
    index_part, sep, hex_part = text.partition(":")
    if not sep:
        raise fail("missing ':' separator")
    if not index_part or not hex_part:
        raise fail("empty index or value")
    if not _INDEX_RE.fullmatch(index_part):
        raise fail(f"index {index_part!r} is not a decimal number")
    digits = index_part.lstrip("0")
    if not digits:
        raise fail("index must be non-zero")
    # int() refuses very long digit strings, so check the length first
    if len(digits) > len(str(MAX_SHARES)) or int(digits) > MAX_SHARES:
        raise fail(f"index exceeds {MAX_SHARES}")
    index = int(digits)
    if not _HEX_RE.fullmatch(hex_part):
        raise fail("value is not valid hex")
    return Share(index=index, value=bytes.fromhex(hex_part))


def encode_shares(shares: Iterable[Share]) -> List[str]:
    return [encode_share(s) for s in shares]


def decode_shares(encoded: Iterable[str]) -> List[Share]:
    return [decode_share(text, share_position=i) for i, text in enumerate(encoded)]


__all__ = ["encode_share", "decode_share", "encode_shares", "decode_shares"]
