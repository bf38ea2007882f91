from __future__ import annotations

from enum import Enum


class StorageBackend(str, Enum):
    """Where segments are persisted."""

    FILE = "file"
    MYSQL = "mysql"


class ErrorKind(str, Enum):
    """Error variants as they appear in API responses."""

    NOT_FOUND = "NotFound"
    ALREADY_EXISTS = "AlreadyExists"
    VALIDATION = "ValidationError"
