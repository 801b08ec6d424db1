"""
sha256-digest - Main Entry Point

Hashes a single message given on the command line and prints its SHA-256
digest in hexadecimal.

Usage:
    hash-me 'message to hash'
"""

import logging
import sys
from typing import List, Optional

from .config import Settings
from .core_crypto import DigestContext, DigestError
from .logger import configure_logging
from .output import digest_to_hex
from .reference import matches_reference


logger = logging.getLogger(__name__)

USAGE = "[USAGE] hash-me 'message to hash'"

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_MISMATCH = 2


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for hash-me. Returns the process exit status."""
    args = sys.argv[1:] if argv is None else argv
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    if len(args) != 1:
        print(USAGE)
        return EXIT_USAGE

    # Undecodable argv bytes arrive as surrogates; surrogateescape restores them
    data = args[0].encode(settings.text_encoding, "surrogateescape")

    try:
        with DigestContext.create() as context:
            message = context.create_message_from_text(data)
            digest = message.preprocess().digest()
    except DigestError as exc:
        logger.error("Hashing failed: %s", exc)
        return EXIT_USAGE

    print(digest_to_hex(digest))

    if settings.show_raw:
        sys.stdout.flush()
        sys.stdout.buffer.write(b"CHARS: " + digest + b"\n")
        sys.stdout.buffer.flush()

    if settings.verify and not matches_reference(data, digest):
        logger.error("Digest does not match the reference implementation")
        return EXIT_MISMATCH

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
