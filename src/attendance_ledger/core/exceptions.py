from __future__ import annotations

from .enums import ErrorKind


class DomainError(Exception):
    """Base exception for business rule violations."""

    kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(self, msg: str):
        super().__init__(msg)
        self.msg = msg

    def to_dict(self) -> dict:
        return {self.kind.value: {"msg": self.msg}}


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    kind = ErrorKind.VALIDATION


class NotFoundError(DomainError):
    """Raised when a lookup or update targets a key absent from its store."""

    kind = ErrorKind.NOT_FOUND


class AlreadyExistsError(DomainError):
    """Raised by strict creation when the key is already taken."""

    kind = ErrorKind.ALREADY_EXISTS


class StorageError(Exception):
    """Base exception for storage faults. These are not recoverable by the caller."""


class SegmentUnavailableError(StorageError):
    """Raised when a segment cannot be read or written."""


class CorruptSegmentError(StorageError):
    """Raised when a segment holds bytes that do not decode."""


class RecordTooLargeError(StorageError):
    """Raised when an encoded record exceeds the store's size bound."""


class AllocatorExhaustedError(StorageError):
    """Raised when the identifier counter has reached the u64 limit."""
