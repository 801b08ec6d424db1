"""
Digest Context

A DigestContext holds the SHA-256 constants (initial hash values and round
constants) and owns every Message created against it.

Features:
- Messages from text or from a buffer with an explicit bit length
- Sub-byte messages (trailing unused bits masked to zero)
- Registration order preserved; deletion from head, middle or tail
- Destroying the context releases every message still registered
- Message collection guarded by a lock for multi-threaded callers

Example:
    >>> with DigestContext.create() as ctx:
    ...     msg = ctx.create_message_from_text("")
    ...     digest = msg.preprocess().digest()
    >>> digest.hex()[:16]
    'e3b0c44298fc1c14'
"""

import logging
import threading
from typing import Iterator, List, Optional, Tuple, Union

from .errors import AllocationError, NotFoundError
from .message import Message
from .padding import byte_length, mask_trailing_bits
from .sha256 import H_INITIAL, K


logger = logging.getLogger(__name__)


class DigestContext:
    """
    Owner of the hashing constants and of a collection of Messages.

    Use DigestContext.create() to obtain one, and destroy() (or a `with`
    block) to release it together with its messages.
    """

    def __init__(self):
        self._initial_hash_values: Tuple[int, ...] = tuple(H_INITIAL)
        self._round_constants: Tuple[int, ...] = tuple(K)
        self._messages: List[Message] = []
        self._lock = threading.Lock()
        self._destroyed = False

    @classmethod
    def create(cls) -> 'DigestContext':
        """
        Create a new context with the constants loaded and no messages.

        Raises:
            AllocationError: If the context cannot be allocated
        """
        try:
            return cls()
        except MemoryError as exc:
            raise AllocationError("Cannot allocate digest context") from exc

    def __enter__(self) -> 'DigestContext':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.destroy()

    def __len__(self) -> int:
        with self._lock:
            return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        # Snapshot so callers may delete while iterating
        with self._lock:
            return iter(list(self._messages))

    def __contains__(self, message: object) -> bool:
        with self._lock:
            return any(entry is message for entry in self._messages)

    @property
    def initial_hash_values(self) -> Tuple[int, ...]:
        """The 8 initial hash words (FIPS 180-4 section 5.3.3)."""
        return self._initial_hash_values

    @property
    def round_constants(self) -> Tuple[int, ...]:
        """The 64 round constants (FIPS 180-4 section 4.2.2)."""
        return self._round_constants

    @property
    def messages(self) -> List[Message]:
        """Registered messages, in creation order (a copy)."""
        with self._lock:
            return list(self._messages)

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    def _ensure_usable(self) -> None:
        if self._destroyed:
            raise RuntimeError("Digest context has been destroyed")

    def _register(self, raw_bits: bytes, bit_length: int) -> Message:
        """Build a message around a ready buffer, then register it."""
        try:
            message = Message(self, raw_bits, bit_length)
        except MemoryError as exc:
            raise AllocationError("Cannot allocate message") from exc

        with self._lock:
            self._ensure_usable()
            self._messages.append(message)
        return message

    def create_message_from_text(
        self,
        text: Union[str, bytes],
        encoding: str = 'utf-8',
    ) -> Message:
        """
        Create a message holding exactly the bytes of `text`.

        No terminator byte is included; bit_length is 8 * byte count.

        Args:
            text: String (encoded with `encoding`) or raw bytes
            encoding: Encoding applied to str input

        Returns:
            The new, registered Message in RAW state

        Raises:
            AllocationError: If the message or its buffer cannot be allocated
            TypeError: If text is neither str nor bytes
        """
        self._ensure_usable()

        if isinstance(text, str):
            data = text.encode(encoding)
        elif isinstance(text, (bytes, bytearray, memoryview)):
            data = bytes(text)
        else:
            raise TypeError(f"Expected str or bytes, got {type(text).__name__}")

        return self.create_message_from_buffer(data, len(data) * 8)

    def create_message_from_buffer(self, data: bytes, bit_length: int) -> Message:
        """
        Create a message from the first `bit_length` bits of a buffer.

        If bit_length is not a multiple of 8, the unused low-order bits of
        the final byte are forced to zero. A zero-bit message still gets a
        one-byte zeroed buffer.

        Args:
            data: Source buffer, at least ceil(bit_length / 8) bytes
            bit_length: Number of significant bits

        Returns:
            The new, registered Message in RAW state

        Raises:
            AllocationError: If the message or its buffer cannot be allocated
            ValueError: If bit_length is negative or the buffer is too short
        """
        self._ensure_usable()

        if bit_length < 0:
            raise ValueError("Bit length must be non-negative")

        size = byte_length(bit_length)
        if len(data) < size:
            raise ValueError(
                f"Buffer of {len(data)} bytes is too short for {bit_length} bits"
            )

        try:
            buffer = bytearray(max(size, 1))
        except MemoryError as exc:
            raise AllocationError(
                f"Cannot allocate {size} byte message buffer"
            ) from exc

        buffer[:size] = data[:size]
        mask_trailing_bits(buffer, bit_length)

        return self._register(bytes(buffer), bit_length)

    def delete_message(self, message: Optional[Message]) -> None:
        """
        Unregister and release a message.

        Raises:
            NotFoundError: If message is None, belongs to another context
                or was already deleted. Nothing is mutated in that case.
        """
        with self._lock:
            if not self._messages:
                logger.warning("No messages to be removed.")
                raise NotFoundError("No messages to be removed")

            for index, entry in enumerate(self._messages):
                if entry is message:
                    break
            else:
                logger.warning("Message wasn't found.")
                raise NotFoundError("Message wasn't found")

            del self._messages[index]

        message._release()

    def destroy(self) -> None:
        """
        Release every registered message (head first), then the context.

        Destroying an already destroyed context does nothing.
        """
        with self._lock:
            if self._destroyed:
                return

            while self._messages:
                self._messages.pop(0)._release()

            self._destroyed = True

        logger.debug("Digest context destroyed")
