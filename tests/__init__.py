# sha256-digest Test Suite
"""
Test suite including:
- Known-answer and reference cross-check tests
- Padding, message lifecycle and context ownership tests
- Output formatting, configuration and CLI tests

Run with: pytest
Coverage: coverage run -m pytest && coverage report
"""
