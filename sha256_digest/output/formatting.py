"""
Digest Output Formatting

Thin, stateless helpers around a Message's outputs:

- Hex rendering of a digest (lowercase, most significant nibble first)
- Hex parsing back to the raw 32 bytes
- Debug printers: raw content, bit patterns before and after padding,
  and the hash in uppercase hex plus raw characters

The printers only format; they never change a message.
"""

import logging
import string
from typing import List, Optional

from ..config import settings
from ..core_crypto.message import Message
from ..core_crypto.sha256 import DIGEST_SIZE


logger = logging.getLogger(__name__)

RULER = "=" * 38


def digest_to_hex(digest: bytes) -> str:
    """Render a digest as a lowercase hexadecimal string."""
    return ''.join(f"{byte:02x}" for byte in digest)


def hex_to_digest(hex_string: str) -> bytes:
    """
    Parse a 64-character hexadecimal digest back to its 32 raw bytes.

    Raises:
        ValueError: If the string is not 64 hexadecimal characters
    """
    hex_string = hex_string.strip()
    if len(hex_string) != DIGEST_SIZE * 2:
        raise ValueError(
            f"Digest must be {DIGEST_SIZE * 2} hex characters, got {len(hex_string)}"
        )
    if any(char not in string.hexdigits for char in hex_string):
        raise ValueError("Digest contains non-hexadecimal characters")
    return bytes.fromhex(hex_string)


def get_hash(message: Message) -> Optional[str]:
    """
    Get the 64-character lowercase hex digest of a digested message.

    Returns:
        Hex string, or None if the message is not digested yet
    """
    if not message.is_digested:
        logger.warning("Trying to get the hash of a message not yet digested.")
        return None
    return digest_to_hex(message.digest_bytes)


def _bit_lines(data: bytes, bytes_per_line: int) -> List[str]:
    """Group bytes as 8-bit patterns, `bytes_per_line` bytes per line."""
    patterns = [f"{byte:08b}" for byte in data]
    return [
        ' '.join(patterns[i:i + bytes_per_line])
        for i in range(0, len(patterns), bytes_per_line)
    ]


def format_message(message: Message) -> str:
    """Render the raw content and bit length of a message."""
    content = message.raw_bits[:max(message.byte_count, 1)]
    text = content.decode('latin-1')
    return '\n'.join([
        RULER,
        "Message:",
        f"'{text}'",
        f"Length: {message.bit_length} bits.",
        RULER,
    ])


def format_bits(message: Message, bytes_per_line: Optional[int] = None) -> str:
    """
    Render a message's bit pattern before and after padding.

    Each byte is shown as 8 bits, bytes are separated by spaces, and lines
    hold `bytes_per_line` bytes (10 by default).

    Returns:
        The rendering, or a short notice if the message is not preprocessed
    """
    if not message.is_preprocessed:
        logger.warning("Message wasn't pre-processed yet.")
        return "Message not pre-processed."

    if bytes_per_line is None:
        bytes_per_line = settings.debug_bytes_per_line

    lines = [RULER, f"Message ({message.bit_length} bits):"]
    lines.extend(_bit_lines(message.raw_bits[:message.byte_count], bytes_per_line))
    lines.append(f"Preprocessed message {message.padded_bit_length} bits:")
    lines.extend(_bit_lines(message.padded_bits, bytes_per_line))
    lines.append(RULER)
    return '\n'.join(lines)


def format_hash(message: Message) -> str:
    """Render the hash as an uppercase hex line plus a raw characters line."""
    if not message.is_digested:
        logger.warning("Trying to show a hash of a message not yet digested.")
        return "Message not digested."

    digest = message.digest_bytes
    return '\n'.join([
        f"HASH: {digest.hex().upper()}",
        f"CHARS: {digest.decode('latin-1')}",
    ])


def show_message(message: Message) -> None:
    """Print the raw content of a message."""
    print(format_message(message))


def debug_bits(message: Message, bytes_per_line: Optional[int] = None) -> None:
    """Print the bit pattern of a message before and after padding."""
    print(format_bits(message, bytes_per_line))


def show_hash(message: Message) -> None:
    """Print the hash of a digested message."""
    print(format_hash(message))
