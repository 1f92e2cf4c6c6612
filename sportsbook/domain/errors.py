"""Domain error codes for the sportsbook services."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes, mirroring the status a transport would report."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL = "INTERNAL"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidRaceIdError(DomainError):
    """Raised when a race ID is not a positive integer."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ARGUMENT,
            message="invalid race ID",
        )


class RaceNotFoundError(DomainError):
    """Raised when no race has the requested ID."""

    def __init__(self, race_id: int) -> None:
        super().__init__(
            code=ErrorCode.NOT_FOUND,
            message="race not found",
        )
        self.race_id = race_id


class ServiceError(DomainError):
    """Raised when a lookup fails for a reason other than a missing row."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INTERNAL, message=message)


class NoRowsError(LookupError):
    """Raised by repositories when a single-row query matches nothing."""


__all__ = [
    "DomainError",
    "ErrorCode",
    "InvalidRaceIdError",
    "NoRowsError",
    "RaceNotFoundError",
    "ServiceError",
]
