"""
Digest Message

A Message is a single logical input undergoing two irreversible state
transitions:

    RAW -> PREPROCESSED -> DIGESTED

Messages are created by a DigestContext, which owns their lifetime.
Re-running a transition that already happened is a no-op (logged as a
warning), while digesting a raw message is an error.
"""

import logging
from enum import Enum
from typing import Optional, TYPE_CHECKING

from .errors import AllocationError, NotPreprocessedError
from .padding import byte_length, padded_length, pad_message
from .sha256 import compress_padded

if TYPE_CHECKING:
    from .context import DigestContext


logger = logging.getLogger(__name__)


class MessageState(Enum):
    """Lifecycle states of a Message (forward-only)."""

    RAW = "raw"
    PREPROCESSED = "preprocessed"
    DIGESTED = "digested"


class Message:
    """
    One input to be hashed, with its own buffers and resulting digest.

    Do not construct directly; use DigestContext.create_message_from_text()
    or DigestContext.create_message_from_buffer().

    Example:
        >>> with DigestContext.create() as ctx:
        ...     msg = ctx.create_message_from_text("abc")
        ...     digest = msg.preprocess().digest()
        >>> digest.hex()[:16]
        'ba7816bf8f01cfea'
    """

    def __init__(self, owner: 'DigestContext', raw_bits: bytes, bit_length: int):
        self._owner: Optional['DigestContext'] = owner
        self._raw_bits = raw_bits
        self._bit_length = bit_length
        self._state = MessageState.RAW
        self._padded_bits: Optional[bytes] = None
        self._padded_bit_length = 0
        self._digest: Optional[bytes] = None

    def __repr__(self) -> str:
        return (
            f"Message(bit_length={self._bit_length}, "
            f"state={self._state.value})"
        )

    @property
    def raw_bits(self) -> bytes:
        """Original content; the final byte is masked past bit_length."""
        return self._raw_bits

    @property
    def bit_length(self) -> int:
        return self._bit_length

    @property
    def state(self) -> MessageState:
        return self._state

    @property
    def padded_bits(self) -> Optional[bytes]:
        """Padded buffer, or None while the message is still raw."""
        return self._padded_bits

    @property
    def padded_bit_length(self) -> int:
        """Padded length in bits, 0 while the message is still raw."""
        return self._padded_bit_length

    @property
    def digest_bytes(self) -> Optional[bytes]:
        """The 32-byte digest, or None unless the message is digested."""
        return self._digest

    @property
    def hash_hex(self) -> Optional[str]:
        """Digest as a lowercase hexadecimal string, if digested."""
        return self._digest.hex() if self._digest is not None else None

    @property
    def owner(self) -> Optional['DigestContext']:
        """The context this message is registered with (None once deleted)."""
        return self._owner

    @property
    def is_preprocessed(self) -> bool:
        return self._state is not MessageState.RAW

    @property
    def is_digested(self) -> bool:
        return self._state is MessageState.DIGESTED

    @property
    def is_released(self) -> bool:
        return self._owner is None

    def _ensure_live(self) -> None:
        if self._owner is None:
            raise RuntimeError("Message has been deleted")

    def _release(self) -> None:
        """Drop buffers and the owner link. Called by the owning context."""
        self._owner = None
        self._raw_bits = b''
        self._padded_bits = None
        self._digest = None

    def preprocess(self) -> 'Message':
        """
        Pad the message to a multiple of 512 bits.

        Calling this on an already preprocessed (or digested) message is a
        no-op. On failure the message stays raw.

        Returns:
            self, to allow chaining

        Raises:
            AllocationError: If the padded buffer cannot be obtained
        """
        self._ensure_live()

        if self._state is not MessageState.RAW:
            logger.warning("Trying to pre-process a message already processed.")
            return self

        try:
            padded = pad_message(self._raw_bits, self._bit_length)
        except MemoryError as exc:
            raise AllocationError(
                f"Cannot allocate padded buffer for {self._bit_length} bits"
            ) from exc

        self._padded_bits = padded
        self._padded_bit_length = padded_length(self._bit_length)
        self._state = MessageState.PREPROCESSED
        return self

    def digest(self, context: Optional['DigestContext'] = None) -> bytes:
        """
        Run the compression rounds and store the 32-byte digest.

        Calling this on an already digested message is a no-op that
        returns the stored digest.

        Args:
            context: Source of the constants (defaults to the owner)

        Returns:
            The 32-byte digest

        Raises:
            NotPreprocessedError: If the message is still raw
        """
        self._ensure_live()
        if context is None:
            context = self._owner

        if self._state is MessageState.RAW:
            raise NotPreprocessedError(
                "Trying to digest a message that wasn't pre-processed"
            )

        if self._state is MessageState.DIGESTED:
            logger.warning("Message already digested.")
            return self._digest

        self._digest = compress_padded(
            self._padded_bits,
            context.initial_hash_values,
            context.round_constants,
        )
        self._state = MessageState.DIGESTED
        return self._digest

    @property
    def byte_count(self) -> int:
        """Number of bytes holding the content (byte ceiling of bit_length)."""
        return byte_length(self._bit_length)
