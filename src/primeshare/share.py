"""Share record produced by split and consumed by combine."""
from __future__ import annotations

from dataclasses import dataclass

from primeshare.errors import InvalidParameter


@dataclass(frozen=True)
class Share:
    """A single point of every shared polynomial.

    ``index`` is the x-coordinate, ``value`` holds one encoded y-coordinate
    per secret byte. ``bytearray`` and ``memoryview`` values are copied into
    ``bytes``; anything else is rejected.
    """

    index: int
    value: bytes

    def __post_init__(self) -> None:
        if isinstance(self.value, bytes):
            return
        if not isinstance(self.value, (bytearray, memoryview)):
            raise InvalidParameter(
                f"share value must be bytes-like, got {type(self.value).__name__}",
                field="value",
            )
        object.__setattr__(self, "value", bytes(self.value))

    def __repr__(self) -> str:
        return f"Share(index={self.index}, value=<{len(self.value)} bytes>)"


__all__ = ["Share"]
