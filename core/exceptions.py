"""Common exception classes for the core package.

All exceptions ultimately inherit from :class:`PromptLibraryError`, allowing
callers to catch a single base class for any library-related failure while
still distinguishing individual error categories when needed.

Library mutations never raise these to their caller; persistence failures are
wrapped in :class:`PromptStorageError` and returned inside the operation
result instead.

Updates:
  v0.2.0 - 2026-10-11 - Add decode error for opt-in strict loading.
  v0.1.0 - 2026-10-06 - Created module.
"""

from __future__ import annotations


class PromptLibraryError(Exception):
    """Base exception for Prompt Library failures."""


class PromptNotFoundError(PromptLibraryError):
    """Raised when a prompt reference does not resolve to a stored prompt."""


class PromptStorageError(PromptLibraryError):
    """Raised when encoding or writing library state to the store fails."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class PromptDecodeError(PromptLibraryError):
    """Raised when persisted library state cannot be decoded."""


class CategoryError(PromptLibraryError):
    """Raised when a category label is rejected."""
