"""Error taxonomy shared by the split and combine engines."""
from __future__ import annotations

from typing import Optional


class SecretSharingError(RuntimeError):
    """Base class for every error raised by :mod:`primeshare`."""


class InvalidParameter(SecretSharingError):
    """Raised when the caller passes an unusable ``n``, ``k`` or secret."""

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class InsufficientShares(SecretSharingError):
    """Raised when fewer shares than the threshold reach :func:`combine`."""

    def __init__(self, required: int, supplied: int) -> None:
        super().__init__(f"need at least {required} shares, got {supplied}")
        self.required = required
        self.supplied = supplied


class CorruptShare(SecretSharingError):
    """Raised when share data is inconsistent, tampered or mismatched."""

    def __init__(
        self,
        message: str,
        *,
        index: Optional[int] = None,
        share_position: Optional[int] = None,
        byte_position: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        # place of the offending share in the caller's collection
        self.share_position = share_position
        # offset of the offending element in the secret
        self.byte_position = byte_position


class InvalidEncodedShare(CorruptShare):
    """Raised when a ``"<index>:<hex>"`` string cannot be parsed."""

    def __init__(self, message: str, *, text: str = "", share_position: Optional[int] = None) -> None:
        super().__init__(message, share_position=share_position)
        self.text = text


class RandomnessFailure(SecretSharingError):
    """Raised when the randomness source fails while building polynomials."""


class FieldError(SecretSharingError):
    """Raised on an impossible field operation such as inverting zero.

    Seeing this error means a logic bug, not bad input.
    """

    def __init__(self, message: str, *, value: Optional[int] = None) -> None:
        super().__init__(message)
        self.value = value


__all__ = [
    "SecretSharingError",
    "InvalidParameter",
    "InsufficientShares",
    "CorruptShare",
    "InvalidEncodedShare",
    "RandomnessFailure",
    "FieldError",
]
