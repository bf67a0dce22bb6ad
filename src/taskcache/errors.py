"""Exception hierarchy for taskcache."""

from __future__ import annotations


class TaskCacheError(Exception):
    """Base exception for all taskcache errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(TaskCacheError):
    """Configuration validation or resolution failed."""


class InternalError(TaskCacheError):
    """A taskcache internal error (bug) or invariant violation.

    Raised when a caller builds a state that cannot exist, such as a disabled
    caching state with no reason. It signals a defect in the calling code and
    is not meant to be caught and handled at runtime.
    """
