from __future__ import annotations


class OnelinersError(Exception):
    """Base exception for this project."""


class ConfigError(OnelinersError):
    """Raised when configuration is invalid or incomplete."""

    def __init__(self, message: str, *, path: str | None = None):
        super().__init__(f"{path}: {message}" if path else message)
        self.path = path


class TextDecodeError(OnelinersError, ValueError):
    """Raised when encoded text cannot be decoded for reversal."""

    def __init__(self, message: str, *, encoding: str, position: int | None = None):
        super().__init__(message)
        self.encoding = encoding
        self.position = position


class UsageError(OnelinersError):
    """Raised when command-line input cannot be interpreted."""
