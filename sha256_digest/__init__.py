# sha256-digest
"""
SHA-256 implemented from scratch (FIPS 180-4).

A DigestContext owns the constants and the Messages created against it;
each Message is preprocessed (padded) and then digested.
"""

from .core_crypto import (
    AllocationError,
    DigestContext,
    DigestError,
    Message,
    MessageState,
    NotFoundError,
    NotPreprocessedError,
    sha256,
    sha256_bits,
    sha256_hex,
    sha256_string,
)

__version__ = "1.0.0"

__all__ = [
    'DigestContext',
    'Message',
    'MessageState',
    'DigestError',
    'AllocationError',
    'NotPreprocessedError',
    'NotFoundError',
    'sha256',
    'sha256_bits',
    'sha256_hex',
    'sha256_string',
]
