"""
Tests for the hash-me command line entry point.
"""

import logging
import os

import pytest
from sha256_digest import main as main_module
from sha256_digest.core_crypto.sha256 import sha256
from sha256_digest.main import main, USAGE, EXIT_OK, EXIT_USAGE, EXIT_MISMATCH


ABC_HEX = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SHA256_LOG_LEVEL", "SHA256_SHOW_RAW", "SHA256_VERIFY",
                 "SHA256_DEBUG_BYTES_PER_LINE", "SHA256_TEXT_ENCODING"):
        monkeypatch.delenv(name, raising=False)
    yield
    logging.getLogger("sha256_digest").handlers.clear()


class TestCommandLine:
    """Exit codes and output of hash-me."""

    def test_hashes_argument(self, capsys):
        assert main(["abc"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == ABC_HEX

    def test_empty_argument(self, capsys):
        assert main([""]) == EXIT_OK
        out = capsys.readouterr().out.strip()
        assert out == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"

    def test_missing_argument(self, capsys):
        assert main([]) == EXIT_USAGE
        assert capsys.readouterr().out.strip() == USAGE

    def test_extra_arguments(self, capsys):
        assert main(["a", "b"]) == EXIT_USAGE
        assert USAGE in capsys.readouterr().out

    def test_verify_against_reference(self, monkeypatch, capsys):
        monkeypatch.setenv("SHA256_VERIFY", "1")
        assert main(["The quick brown fox"]) == EXIT_OK

    def test_verify_mismatch(self, monkeypatch, capsys):
        monkeypatch.setenv("SHA256_VERIFY", "true")
        monkeypatch.setattr(main_module, "matches_reference", lambda data, digest: False)
        assert main(["abc"]) == EXIT_MISMATCH
        assert "does not match" in capsys.readouterr().err

    def test_undecodable_argument_hashes_raw_bytes(self, capsys):
        """Argument bytes that are not valid UTF-8 are hashed as given."""
        assert main([os.fsdecode(b"\xff")]) == EXIT_OK
        assert capsys.readouterr().out.strip() == sha256(b"\xff").hex()

    def test_undecodable_argument_verifies(self, monkeypatch, capsys):
        monkeypatch.setenv("SHA256_VERIFY", "1")
        assert main([os.fsdecode(b"caf\xe9")]) == EXIT_OK

    def test_show_raw_prints_digest_bytes(self, monkeypatch, capfdbinary):
        """SHA256_SHOW_RAW adds a CHARS: line holding the raw digest."""
        monkeypatch.setenv("SHA256_SHOW_RAW", "1")
        assert main(["abc"]) == EXIT_OK
        out = capfdbinary.readouterr().out
        assert out.startswith(ABC_HEX.encode() + b"\n")
        assert b"CHARS: " + sha256(b"abc") + b"\n" in out

    def test_bad_grouping_setting_does_not_break_cli(self, monkeypatch, capsys):
        monkeypatch.setenv("SHA256_DEBUG_BYTES_PER_LINE", "x")
        assert main(["abc"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == ABC_HEX
