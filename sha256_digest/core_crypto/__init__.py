# Core Cryptography Module
"""
Core SHA-256 implementation including:
- Message padding (preprocessing)
- Message schedule and compression
- Message lifecycle (raw, preprocessed, digested)
- Digest context owning the constants and messages
"""

from .context import DigestContext
from .errors import (
    AllocationError,
    DigestError,
    NotFoundError,
    NotPreprocessedError,
)
from .message import Message, MessageState
from .sha256 import sha256, sha256_bits, sha256_hex, sha256_string

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
