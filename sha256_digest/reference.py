"""
Reference Digest

Computes SHA-256 with the `cryptography` package so results of the
from-scratch implementation can be cross-checked. Only whole-byte inputs
are supported by the reference backend.
"""

import hmac

from cryptography.hazmat.primitives import hashes


def reference_sha256(data: bytes) -> bytes:
    """Compute SHA-256 of data with the cryptography backend."""
    digest = hashes.Hash(hashes.SHA256())
    digest.update(data)
    return digest.finalize()


def matches_reference(data: bytes, digest: bytes) -> bool:
    """Check a digest against the reference backend (constant-time compare)."""
    return hmac.compare_digest(reference_sha256(data), digest)
