"""Tokenizing, quote checking and syntax validation for shell command lines."""

__version__ = "0.1.0"
__all__ = ["strings", "cformat", "lines", "tokens", "syntax", "session"]