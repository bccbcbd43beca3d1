"""Shared fixtures for the primeshare tests."""
from __future__ import annotations

import pytest

from primeshare import split


class CountingSource:
    """Deterministic randomness source that records how often it is used."""

    def __init__(self, value: int = 1) -> None:
        self.value = value
        self.calls = 0

    def randbelow(self, upper: int) -> int:
        self.calls += 1
        return self.value % upper


@pytest.fixture
def counting_source() -> CountingSource:
    return CountingSource()


@pytest.fixture
def secret() -> bytes:
    return b"hello shamir"


@pytest.fixture
def five_of_three(secret):
    return split(secret, 5, 3)
