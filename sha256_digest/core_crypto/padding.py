"""
SHA-256 Message Padding (Preprocessing)

Pads a message of arbitrary bit length so the result is a multiple of
512 bits, as defined in FIPS 180-4 section 5.1.1.

Padding rules:
1. Append a single '1' bit right after the last content bit
2. Append '0' bits until the length is 64 bits short of a multiple of 512
3. Append the original bit length as a 64-bit big-endian integer

Bit lengths that are not a multiple of 8 are supported: only the first
`bit_length` bits of the content are significant.
"""

# Block size and length field size, in bits
BLOCK_BITS = 512
LENGTH_FIELD_BITS = 64


def byte_length(bit_length: int) -> int:
    """Number of bytes needed to hold `bit_length` bits (byte ceiling)."""
    return (bit_length + 7) // 8


def padded_length(bit_length: int) -> int:
    """
    Compute the padded length in bits for a message.

    This is the smallest multiple of 512 that is at least
    bit_length + 1 (the '1' bit) + 64 (the length field).

    Args:
        bit_length: Length of the original message in bits

    Returns:
        Padded length in bits (positive multiple of 512)
    """
    minimum = bit_length + 1 + LENGTH_FIELD_BITS
    return ((minimum + BLOCK_BITS - 1) // BLOCK_BITS) * BLOCK_BITS


def mask_trailing_bits(buffer: bytearray, bit_length: int) -> None:
    """
    Zero the unused low-order bits of the final byte, in place.

    When bit_length is not a multiple of 8, the rightmost
    8 - bit_length % 8 bits of the last byte carry no content.
    """
    remainder = bit_length % 8
    if remainder:
        last = byte_length(bit_length) - 1
        buffer[last] &= (0xFF << (8 - remainder)) & 0xFF


def pad_message(data: bytes, bit_length: int) -> bytes:
    """
    Pad the message according to the SHA-256 specification.

    The buffer starts zero-filled, so the zero bits between the '1' bit
    and the length field need no separate loop.

    Args:
        data: Message content, at least byte_length(bit_length) bytes
        bit_length: Number of significant bits in data

    Returns:
        Padded message as bytes (length is a multiple of 64 bytes)

    Raises:
        MemoryError: If the padded buffer cannot be obtained
    """
    total_bits = padded_length(bit_length)
    padded = bytearray(total_bits // 8)

    # Copy the content bytes (including a partial final byte)
    content = data[:byte_length(bit_length)]
    padded[:len(content)] = content
    mask_trailing_bits(padded, bit_length)

    # Append the '1' bit at position bit_length (MSB first within a byte)
    padded[bit_length // 8] |= 1 << (7 - bit_length % 8)

    # Original length as a 64-bit big-endian integer in the last 8 bytes
    padded[-8:] = bit_length.to_bytes(8, byteorder='big')

    return bytes(padded)
