"""
Digest Errors

Error taxonomy shared by the hashing context and its messages.

- AllocationError: a buffer or object could not be obtained
- NotPreprocessedError: digestion attempted on a message still in raw state
- NotFoundError: deletion requested for a missing, foreign or deleted message

None of these abort the process. They are raised to the caller, who decides
whether to log, retry or give up.
"""


class DigestError(Exception):
    """Base class for every error raised by the digest core."""
    pass


class AllocationError(DigestError):
    """Raised when a message or one of its buffers cannot be allocated."""
    pass


class NotPreprocessedError(DigestError):
    """Raised when digesting a message that was never preprocessed."""
    pass


class NotFoundError(DigestError):
    """Raised when a message is not registered with the context."""
    pass
