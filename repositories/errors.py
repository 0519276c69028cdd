"""
repositories/errors.py
----------------------
Error taxonomy of the data access layer and the outcome type returned by writes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    DUPLICATE_ENTITY = "duplicate_entity"
    INVALID_ARGUMENT = "invalid_argument"
    OPERATION_FAILED = "operation_failed"


class RepositoryError(Exception):
    """Base error carrying a `kind` and a human-readable `message`."""

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.OPERATION_FAILED):
        super().__init__(message)
        self.kind = kind
        self.message = message


class DuplicateEntityError(RepositoryError):
    """The entity violates a uniqueness constraint (e.g. email already registered)."""

    def __init__(self, message: str):
        super().__init__(message, ErrorKind.DUPLICATE_ENTITY)


class InvalidArgumentError(RepositoryError):
    """An argument the operation cannot accept (e.g. None preferences)."""

    def __init__(self, message: str):
        super().__init__(message, ErrorKind.INVALID_ARGUMENT)


@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of a write. Truthy on success, so `if repo.add_user(user):` keeps working,
    while `error` exposes what went wrong on failure.
    """
    ok: bool
    error: Optional[RepositoryError] = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls) -> "OperationResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, message: str) -> "OperationResult":
        return cls(ok=False, error=RepositoryError(message))
