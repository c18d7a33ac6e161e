"""Domain error codes for the theater module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    UNKNOWN_PLAY_TYPE = "UNKNOWN_PLAY_TYPE"
    UNKNOWN_PLAY = "UNKNOWN_PLAY"
    INVALID_AUDIENCE = "INVALID_AUDIENCE"
    INVALID_INVOICE = "INVALID_INVOICE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class UnknownPlayTypeError(DomainError):
    """Raised when a play's type is not one we know how to price."""

    def __init__(self, play_type: object) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_PLAY_TYPE,
            message=f"unknown type: {play_type}",
        )
        self.play_type = play_type


class UnknownPlayError(DomainError):
    """Raised when a performance references a play missing from the catalog."""

    def __init__(self, play_id: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_PLAY,
            message=f"Play not found: {play_id}",
        )
        self.play_id = play_id


class InvalidAudienceError(DomainError):
    """Raised when an audience size is negative or not an integer."""

    def __init__(self, audience: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_AUDIENCE,
            message=f"Audience must be a non-negative integer, got {audience!r}",
        )
        self.audience = audience


class InvalidInvoiceError(DomainError):
    """Raised when raw invoice or catalog data is malformed."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_INVOICE,
            message=detail,
        )
