"""
Unit tests for SHA-256 message padding.
"""

import pytest
from sha256_digest.core_crypto.padding import (
    byte_length, padded_length, mask_trailing_bits, pad_message,
)


class TestPaddedLength:
    """The padded length is the smallest multiple of 512 >= bit_length + 65."""

    @pytest.mark.parametrize("bit_length,expected", [
        (0, 512),
        (1, 512),
        (24, 512),
        (447, 512),
        (448, 1024),
        (511, 1024),
        (512, 1024),
        (959, 1024),
        (960, 1536),
    ])
    def test_boundaries(self, bit_length, expected):
        assert padded_length(bit_length) == expected

    def test_smallest_multiple(self):
        """No smaller multiple of 512 would fit the content and trailer."""
        for bit_length in range(0, 2100, 7):
            total = padded_length(bit_length)
            assert total % 512 == 0
            assert total >= bit_length + 65
            assert total - 512 < bit_length + 65

    def test_byte_length(self):
        assert byte_length(0) == 0
        assert byte_length(1) == 1
        assert byte_length(8) == 1
        assert byte_length(9) == 2


class TestMasking:
    """Unused trailing bits of the final byte are zeroed."""

    def test_mask_partial_byte(self):
        buf = bytearray(b"\xab\xff")
        mask_trailing_bits(buf, 11)
        assert buf == bytearray(b"\xab\xe0")

    def test_whole_bytes_untouched(self):
        buf = bytearray(b"\xff\xff")
        mask_trailing_bits(buf, 16)
        assert buf == bytearray(b"\xff\xff")


class TestPadMessage:
    """Byte-exact padding output."""

    def test_empty(self):
        assert pad_message(b"", 0) == b"\x80" + b"\x00" * 63

    def test_abc(self):
        padded = pad_message(b"abc", 24)
        assert len(padded) == 64
        assert padded[:4] == b"abc\x80"
        assert padded[4:56] == b"\x00" * 52
        assert padded[56:] == (24).to_bytes(8, 'big')

    def test_length_field_spills_to_next_chunk(self):
        """56 bytes of content leave no room for the trailer in one chunk."""
        padded = pad_message(b"a" * 56, 448)
        assert len(padded) == 128
        assert padded[56] == 0x80
        assert padded[-8:] == (448).to_bytes(8, 'big')

    def test_sub_byte_one_bit_placement(self):
        """5 bits '01101' followed by the '1' bit gives 0x6C."""
        padded = pad_message(b"\x68", 5)
        assert padded[0] == 0x6C
        assert padded[1:56] == b"\x00" * 55
        assert padded[-8:] == (5).to_bytes(8, 'big')

    def test_sub_byte_garbage_bits_masked(self):
        assert pad_message(b"\x6f", 5) == pad_message(b"\x68", 5)

    def test_padding_is_deterministic(self):
        assert pad_message(b"hello", 40) == pad_message(b"hello", 40)
