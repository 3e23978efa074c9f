"""SHA-256 helpers."""

from __future__ import annotations

import hashlib

from .blob import Blob32

__all__ = ["sha256", "hash256"]


def _as_bytes(data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


def sha256(data) -> Blob32:
    """Return the SHA-256 digest of ``data`` as a 32-byte blob."""
    return Blob32(hashlib.sha256(_as_bytes(data)).digest())


def hash256(data) -> Blob32:
    """Return SHA-256 applied twice to ``data``."""
    return sha256(sha256(data))