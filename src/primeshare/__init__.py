"""Threshold secret sharing over the prime field GF(257).

``split`` turns a secret into ``n`` shares and ``combine`` recovers it from
any ``k`` of them::

    shares = split(b"hello shamir", 5, 3)
    assert combine(shares[1:4], 3) == b"hello shamir"
"""

from primeshare.codec import ELEMENT_SIZE
from primeshare.combine import combine
from primeshare.encoding import decode_share, decode_shares, encode_share, encode_shares
from primeshare.errors import (
    CorruptShare,
    FieldError,
    InsufficientShares,
    InvalidEncodedShare,
    InvalidParameter,
    RandomnessFailure,
    SecretSharingError,
)
from primeshare.field import PRIME
from primeshare.share import Share
from primeshare.split import split
from primeshare.validation import MAX_SHARES, MIN_THRESHOLD

__version__ = "0.1.0"

__all__ = [
    "split",
    "combine",
    "Share",
    "encode_share",
    "decode_share",
    "encode_shares",
    "decode_shares",
    "PRIME",
    "ELEMENT_SIZE",
    "MIN_THRESHOLD",
    "MAX_SHARES",
    "SecretSharingError",
    "InvalidParameter",
    "InsufficientShares",
    "CorruptShare",
    "InvalidEncodedShare",
    "RandomnessFailure",
    "FieldError",
]
