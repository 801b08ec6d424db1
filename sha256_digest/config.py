"""
config.py - Digest Configuration
=================================
"""

import os


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_positive_int(name: str, default: int) -> int:
    """Read a positive integer; unparsable or non-positive values fall back to default."""
    try:
        value = int(os.getenv(name, str(default)))
    except ValueError:
        return default
    return value if value >= 1 else default


class Settings:
    """Settings read from the environment."""

    def __init__(self):
        self.log_level: str = os.getenv("SHA256_LOG_LEVEL", "WARNING").upper()
        self.show_raw: bool = _env_flag("SHA256_SHOW_RAW")
        self.verify: bool = _env_flag("SHA256_VERIFY")
        self.debug_bytes_per_line: int = _env_positive_int("SHA256_DEBUG_BYTES_PER_LINE", 10)
        self.text_encoding: str = os.getenv("SHA256_TEXT_ENCODING", "utf-8")

    @classmethod
    def from_env(cls) -> "Settings":
        return cls()


settings = Settings()
