"""Journal exception hierarchy.

All journal errors inherit from JournalError, which carries a human
readable ``message``. Several subclasses also derive from the matching
builtin so callers can catch them the usual way.
"""

from typing import Any


class JournalError(Exception):
    """Base exception for all journal errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class JournalNotFoundError(JournalError):
    """Raised when a requested journal does not exist."""


class VersionConflictError(JournalError):
    """Raised when a journal version is already taken for an entity."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Version conflict: expected {expected}, got {actual}")


class InvalidJournalDataError(JournalError):
    """Raised when a journal references missing or unreadable snapshot data."""


class UnknownJournalableKindError(JournalError, ValueError):
    """Raised when a storage identifier maps to no journalable kind."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown journalable type: {name!r}")


class SnapshotValueError(JournalError, TypeError):
    """Raised when a value cannot be represented in a snapshot."""

    def __init__(self, field: str, value: Any, reason: str | None = None) -> None:
        self.field = field
        super().__init__(
            reason
            or f"Value for field {field!r} is not serializable: {type(value).__name__}"
        )


class FieldNotFoundError(JournalError, KeyError):
    """Raised by strict snapshot lookups when the field is absent."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Field not found: {field!r}")

    def __str__(self) -> str:
        return self.message


class FieldTypeMismatchError(JournalError, TypeError):
    """Raised by strict snapshot lookups when the stored value has the wrong shape."""

    def __init__(self, field: str, target: Any, value: Any) -> None:
        self.field = field
        self.target = target
        self.value = value
        target_name = getattr(target, "__name__", repr(target))
        super().__init__(
            f"Field {field!r} holds {type(value).__name__}, expected {target_name}"
        )
