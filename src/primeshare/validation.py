"""Precondition checks shared by the split and combine engines."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from primeshare.codec import ELEMENT_SIZE
from primeshare.errors import CorruptShare, InsufficientShares, InvalidParameter
from primeshare.share import Share

MIN_THRESHOLD = 2
MAX_SHARES = 255


@dataclass
class ValidationIssue:
    field: str
    message: str


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def threshold_issues(threshold: int) -> list[ValidationIssue]:
    if not _is_int(threshold):
        return [ValidationIssue("threshold", f"threshold must be an integer, got {threshold!r}")]
    if threshold < MIN_THRESHOLD:
        return [ValidationIssue("threshold", f"threshold must be at least {MIN_THRESHOLD}")]
    if threshold > MAX_SHARES:
        return [ValidationIssue("threshold", f"threshold must be <= {MAX_SHARES}")]
    return []


def secret_issues(secret: bytes) -> list[ValidationIssue]:
    if secret is None or len(secret) == 0:
        return [ValidationIssue("secret", "secret must not be empty")]
    return []


def total_shares_issues(total_shares: int, threshold: int) -> list[ValidationIssue]:
    if not _is_int(total_shares):
        return [ValidationIssue("total_shares", f"total_shares must be an integer, got {total_shares!r}")]
    if _is_int(threshold) and total_shares < threshold:
        return [ValidationIssue("total_shares", "total_shares must be >= threshold")]
    if total_shares > MAX_SHARES:
        return [ValidationIssue("total_shares", f"total_shares must be <= {MAX_SHARES}")]
    return []


def share_count_issues(shares: Sequence[Share]) -> list[ValidationIssue]:
    if len(shares) == 0:
        return [ValidationIssue("shares", "no shares provided")]
    return []


def split_issues(secret: bytes, total_shares: int, threshold: int) -> list[ValidationIssue]:
    return collect_issues(
        secret_issues(secret),
        threshold_issues(threshold),
        total_shares_issues(total_shares, threshold),
    )


def combine_issues(shares: Sequence[Share], threshold: int) -> list[ValidationIssue]:
    return collect_issues(share_count_issues(shares), threshold_issues(threshold))


def collect_issues(*sources: Iterable[ValidationIssue]) -> list[ValidationIssue]:
    aggregated: list[ValidationIssue] = []
    for source in sources:
        aggregated.extend(source)
    return aggregated


def _raise_first(issues: List[ValidationIssue]) -> None:
    if issues:
        issue = issues[0]
        raise InvalidParameter(issue.message, field=issue.field)


def require_split_params(secret: bytes, total_shares: int, threshold: int) -> None:
    """Raise :class:`InvalidParameter` for the first broken split parameter."""

    _raise_first(split_issues(secret, total_shares, threshold))


def require_combine_params(shares: Sequence[Share], threshold: int) -> None:
    """Raise :class:`InvalidParameter` or :class:`InsufficientShares`."""

    _raise_first(combine_issues(shares, threshold))
    if len(shares) < threshold:
        raise InsufficientShares(threshold, len(shares))


def used_shares(shares: Sequence[Share], threshold: int) -> list[Share]:
    """Return the first ``threshold`` shares after checking their integrity.

    Surplus shares are not inspected so that a damaged extra share does not
    block a reconstruction that never reads it.
    """

    used = list(shares[:threshold])
    seen: set[int] = set()
    for position, share in enumerate(used):
        index = share.index
        if not _is_int(index) or not 0 <= index <= MAX_SHARES:
            raise CorruptShare(f"share index {index!r} is outside 1..{MAX_SHARES}", index=index, share_position=position)
        if index == 0:
            raise CorruptShare("share index must be non-zero", index=index, share_position=position)
        if index in seen:
            raise CorruptShare(f"duplicate share index {index}", index=index, share_position=position)
        seen.add(index)

    expected = len(used[0].value)
    if expected == 0:
        raise CorruptShare("share value cannot be empty", index=used[0].index, share_position=0)
    if expected % ELEMENT_SIZE:
        raise CorruptShare("share value length must be even", index=used[0].index, share_position=0)
    for position, share in enumerate(used):
        if len(share.value) != expected:
            raise CorruptShare(
                f"share {share.index} has length {len(share.value)}, expected {expected}",
                index=share.index,
                share_position=position,
            )
    return used


__all__ = [
    "MIN_THRESHOLD",
    "MAX_SHARES",
    "ValidationIssue",
    "threshold_issues",
    "secret_issues",
    "total_shares_issues",
    "share_count_issues",
    "split_issues",
    "combine_issues",
    "collect_issues",
    "require_split_params",
    "require_combine_params",
    "used_shares",
]
