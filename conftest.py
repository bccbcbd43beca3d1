# SPDX-FileCopyrightText: 2025 primeshare contributors
# SPDX-License-Identifier: MIT
#
# conftest.py: puts src/ on sys.path and keeps the audit trail out of $HOME.

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.is_dir():
    sys.path.insert(0, str(SRC))  # so that import sees src/


@pytest.fixture(autouse=True)
def _isolated_audit_dir(monkeypatch, tmp_path):
    """Point the audit trail at a per-test directory."""

    import primeshare.audit as audit_module
    import primeshare.policy as policy_module

    audit_dir = tmp_path / "audit"
    monkeypatch.setenv("PRIMESHARE_AUDIT_DIR", str(audit_dir))
    monkeypatch.setattr(policy_module, "policy", policy_module.load_policy())
    monkeypatch.setattr(audit_module, "_default_trail", None)
    yield audit_dir
