"""Hashing helpers for resource payloads."""
from __future__ import annotations

import hashlib
from typing import BinaryIO


def stream_sha1(handle: BinaryIO, chunk_size: int = 2**20) -> str:
    """Compute a SHA1 checksum of everything left in ``handle``."""

    digest = hashlib.sha1()
    for chunk in iter(lambda: handle.read(chunk_size), b""):
        digest.update(chunk)
    return digest.hexdigest()
