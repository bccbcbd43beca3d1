"""Recover a secret from threshold shares with Lagrange interpolation."""
from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple

from primeshare import field
from primeshare.codec import ELEMENT_SIZE, decode_element, element_to_byte
from primeshare.share import Share
from primeshare.validation import require_combine_params, used_shares

_logger = logging.getLogger(__name__)


def basis_at_zero(xs: Sequence[int]) -> List[int]:
    """Return the Lagrange basis polynomials of ``xs`` evaluated at ``x = 0``.

    ``l_i(0) = prod_{j != i} (-x_j) / (x_i - x_j)``. Indices must be distinct;
    a repeated one surfaces as :class:`~primeshare.errors.FieldError`.
    """

    weights = []
    for i, xi in enumerate(xs):
        num = 1
        den = 1
        for j, xj in enumerate(xs):
            if i == j:
                continue
            num = field.mul(num, field.neg(xj))
            den = field.mul(den, field.sub(xi, xj))
        weights.append(field.div(num, den))
    return weights


def lagrange_at_zero(points: Sequence[Tuple[int, int]]) -> int:
    """Interpolate ``points`` and return the polynomial's value at the origin."""

    weights = basis_at_zero([x for x, _ in points])
    total = 0
    for (_, y), w in zip(points, weights):
        total = field.add(total, field.mul(y, w))
    return total


def combine(shares: Iterable[Share], threshold: int) -> bytes:
    """Reconstruct the secret from at least ``threshold`` shares.

    Only the first ``threshold`` shares are read; any valid subset of that
    size gives the same result. Raises
    :class:`~primeshare.errors.InsufficientShares` when too few shares are
    given and :class:`~primeshare.errors.CorruptShare` when the used shares
    do not fit together.
    """

    pool = list(shares)
    require_combine_params(pool, threshold)
    used = used_shares(pool, threshold)
    _logger.debug("Combining %d of %d shares", len(used), len(pool))

    weights = basis_at_zero([s.index for s in used])
    length = len(used[0].value) // ELEMENT_SIZE
    secret = bytearray(length)
    for position in range(length):
        offset = position * ELEMENT_SIZE
        total = 0
        for share_position, (share, w) in enumerate(zip(used, weights)):
            y = decode_element(share.value, offset, index=share.index, share_position=share_position)
            total = field.add(total, field.mul(y, w))
        secret[position] = element_to_byte(total, byte_position=position)
    return bytes(secret)


__all__ = ["basis_at_zero", "lagrange_at_zero", "combine"]
