"""Split a secret into threshold shares."""
from __future__ import annotations

import logging
from typing import List, Optional

from primeshare.codec import ELEMENT_SIZE, byte_to_element, encode_element
from primeshare.polynomial import RandomSource, evaluate, random_polynomial
from primeshare.share import Share
from primeshare.validation import require_split_params

_logger = logging.getLogger(__name__)


def split(
    secret: bytes,
    total_shares: int,
    threshold: int,
    *,
    source: Optional[RandomSource] = None,
) -> List[Share]:
    """Split ``secret`` into ``total_shares`` shares, any ``threshold`` of which recover it.

    Every secret byte gets its own random polynomial of degree
    ``threshold - 1``; share ``x`` stores that polynomial's value at ``x``.
    Parameters are checked before any randomness is drawn, so an
    :class:`~primeshare.errors.InvalidParameter` never leaves partial shares
    behind. Calling twice with the same input yields different shares.
    """

    require_split_params(secret, total_shares, threshold)
    data = bytes(secret)
    _logger.debug(
        "Splitting %d byte secret into %d shares (threshold %d)",
        len(data),
        total_shares,
        threshold,
    )

    buffers = [bytearray(ELEMENT_SIZE * len(data)) for _ in range(total_shares)]
    for position, byte in enumerate(data):
        coefficients = random_polynomial(byte_to_element(byte), threshold, source)
        offset = position * ELEMENT_SIZE
        for x, buf in enumerate(buffers, start=1):
            buf[offset:offset + ELEMENT_SIZE] = encode_element(evaluate(coefficients, x))

    return [Share(index=x, value=bytes(buf)) for x, buf in enumerate(buffers, start=1)]


__all__ = ["split"]
