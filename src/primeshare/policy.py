"""Runtime configuration for the command line and the audit trail.

Values can be overridden by environment variables. The field modulus and the
share limits are constants of the scheme and are not configurable.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _load_path(name: str, default: Path) -> Path:
    value = os.environ.get(name)
    if not value:
        return default
    return Path(value).expanduser()


@dataclass(frozen=True)
class SharingPolicy:
    """Holds runtime tunables for the CLI layer."""

    audit: bool = False
    audit_dir: Path = Path.home() / ".primeshare_audit"
    log_level: str = "WARNING"
    default_shares: int = 5
    default_threshold: int = 3


def load_policy() -> SharingPolicy:
    """Load the policy considering environment overrides."""

    return SharingPolicy(
        audit=_load_bool("PRIMESHARE_AUDIT", False),
        audit_dir=_load_path("PRIMESHARE_AUDIT_DIR", Path.home() / ".primeshare_audit"),
        log_level=os.environ.get("PRIMESHARE_LOG_LEVEL", "WARNING").upper(),
        default_shares=_load_int("PRIMESHARE_DEFAULT_SHARES", 5),
        default_threshold=_load_int("PRIMESHARE_DEFAULT_THRESHOLD", 3),
    )


policy = load_policy()


__all__ = ["SharingPolicy", "policy", "load_policy"]
