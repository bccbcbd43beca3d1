"""Random polynomial construction and evaluation over GF(257)."""
from __future__ import annotations

import logging
import secrets
import threading
from typing import List, Optional, Protocol

from primeshare.errors import RandomnessFailure
from primeshare.field import PRIME

_logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything exposing ``randbelow(upper)`` with the semantics of :func:`secrets.randbelow`."""

    def randbelow(self, upper: int) -> int:  # pragma: no cover - protocol
        ...


class SystemSource:
    """Operating system CSPRNG."""

    def randbelow(self, upper: int) -> int:
        return secrets.randbelow(upper)


_default_source: RandomSource = SystemSource()
_draw_lock = threading.Lock()


def _draw(source: RandomSource) -> int:
    with _draw_lock:
        try:
            value = source.randbelow(PRIME)
        except Exception as exc:
            _logger.debug("Randomness source %r failed: %s", source, exc)
            raise RandomnessFailure(f"randomness source failed: {exc}") from exc
    if not isinstance(value, int) or not 0 <= value < PRIME:
        raise RandomnessFailure(f"randomness source returned {value!r}, expected [0, {PRIME})")
    return value


def random_polynomial(
    constant: int,
    threshold: int,
    source: Optional[RandomSource] = None,
) -> List[int]:
    """Return ``threshold`` coefficients with ``constant`` as the free term.

    The remaining coefficients are drawn independently and uniformly from
    the field for every call. A failing source raises
    :class:`RandomnessFailure`; no other source is tried.
    """

    rng = source if source is not None else _default_source
    return [constant] + [_draw(rng) for _ in range(threshold - 1)]


def evaluate(coefficients: List[int], x: int) -> int:
    """Evaluate ``coefficients`` (lowest degree first) at ``x`` with Horner's rule."""

    result = 0
    for c in reversed(coefficients):
        result = (result * x + c) % PRIME
    return result


__all__ = ["RandomSource", "SystemSource", "random_polynomial", "evaluate"]
