"""Offline audit trail with Ed25519 signatures and hash chaining.

Entries only ever describe the shape of an operation (share count,
threshold, secret length); secret bytes and share values are never logged.
"""
from __future__ import annotations

import hashlib
import json
import os
import time
import uuid
from pathlib import Path
from typing import Any, Dict, Optional

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from primeshare import policy as policy_module

GENESIS = "GENESIS"


class AuditTrail:
    """Append-only chain of signed JSON events stored in one directory."""

    def __init__(self, directory: os.PathLike[str] | str) -> None:
        self.directory = Path(directory)

    @property
    def key_path(self) -> Path:
        return self.directory / "signing_key.pem"

    @property
    def chain_state_path(self) -> Path:
        return self.directory / "chain.state"

    def _ensure_dir(self) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)

    def _load_private_key(self) -> Ed25519PrivateKey:
        self._ensure_dir()
        if self.key_path.exists():
            data = self.key_path.read_bytes()
            return serialization.load_pem_private_key(data, password=None)
        private_key = Ed25519PrivateKey.generate()
        self.key_path.write_bytes(
            private_key.private_bytes(
                encoding=serialization.Encoding.PEM,
                format=serialization.PrivateFormat.PKCS8,
                encryption_algorithm=serialization.NoEncryption(),
            )
        )
        return private_key

    def _load_prev_hash(self) -> str:
        try:
            return self.chain_state_path.read_text().strip()
        except FileNotFoundError:
            return GENESIS

    def record_event(self, event: str, *, details: Dict[str, Any] | None = None) -> Path:
        private_key = self._load_private_key()
        timestamp = int(time.time())
        payload = {
            "event": event,
            "details": details or {},
            "timestamp": timestamp,
            "prev_hash": self._load_prev_hash(),
        }
        message = json.dumps(payload, ensure_ascii=False, sort_keys=True).encode("utf-8")
        signature = private_key.sign(message)
        chain_hash = hashlib.sha3_512(message + signature).hexdigest()
        entry = {
            "payload": payload,
            "signature": signature.hex(),
            "chain_hash": chain_hash,
        }
        file_path = self.directory / f"audit_{timestamp}_{uuid.uuid4().hex}.json"
        file_path.write_text(json.dumps(entry, ensure_ascii=False, indent=2))
        self.chain_state_path.write_text(chain_hash)
        return file_path

    def verify_log(self, path: os.PathLike[str] | str) -> bool:
        data = json.loads(Path(path).read_text())
        payload = json.dumps(data["payload"], ensure_ascii=False, sort_keys=True).encode("utf-8")
        signature = bytes.fromhex(data.get("signature") or "")
        public_key = self._load_private_key().public_key()
        try:
            public_key.verify(signature, payload)
        except InvalidSignature:
            return False
        expected_chain_hash = hashlib.sha3_512(payload + signature).hexdigest()
        return expected_chain_hash == data.get("chain_hash")


_default_trail: Optional[AuditTrail] = None


def default_trail() -> AuditTrail:
    global _default_trail
    if _default_trail is None or _default_trail.directory != policy_module.policy.audit_dir:
        _default_trail = AuditTrail(policy_module.policy.audit_dir)
    return _default_trail


def record_event(event: str, *, details: Dict[str, Any] | None = None) -> Path:
    return default_trail().record_event(event, details=details)


def verify_log(path: os.PathLike[str] | str) -> bool:
    return default_trail().verify_log(path)


__all__ = ["AuditTrail", "default_trail", "record_event", "verify_log"]
