# Output Module
"""
Formatting of finished digests and diagnostic dumps of messages.
"""

from .formatting import (
    debug_bits,
    digest_to_hex,
    format_bits,
    format_hash,
    format_message,
    get_hash,
    hex_to_digest,
    show_hash,
    show_message,
)

__all__ = [
    'digest_to_hex',
    'hex_to_digest',
    'get_hash',
    'format_message',
    'format_bits',
    'format_hash',
    'show_message',
    'debug_bits',
    'show_hash',
]
