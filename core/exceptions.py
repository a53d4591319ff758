"""
Custom exceptions for wire message intake.

Three classes of failure reach callers: validation (bad input), conflict
(sequence number already recorded) and infrastructure (storage failure).
"""
from enum import Enum
from typing import Any, Dict, Optional


class WireIntakeException(Exception):
    """Base exception for all wire message intake errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """
        Initialize exception.

        Args:
            message: Error message, reported to the caller verbatim
            details: Additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(WireIntakeException):
    """Raised when caller-supplied input is invalid."""
    pass


class ParseErrorKind(str, Enum):
    """Rule violated while parsing a wire message."""
    MALFORMED_MESSAGE = "malformed_message"
    INVALID_SEQ_FORMAT = "invalid_seq_format"
    INVALID_ROUTING_NUMBER = "invalid_routing_number"
    INVALID_ACCOUNT_NUMBER = "invalid_account_number"
    INVALID_AMOUNT_FORMAT = "invalid_amount_format"
    NEGATIVE_AMOUNT = "negative_amount"


PARSE_ERROR_MESSAGES: Dict[ParseErrorKind, str] = {
    ParseErrorKind.MALFORMED_MESSAGE: "invalid message format: must contain all information",
    ParseErrorKind.INVALID_SEQ_FORMAT: "invalid SEQ format: must be numeric",
    ParseErrorKind.INVALID_ROUTING_NUMBER: "invalid RTN format: must be exactly 9 digits",
    ParseErrorKind.INVALID_ACCOUNT_NUMBER: "invalid AN format: must be numeric",
    ParseErrorKind.INVALID_AMOUNT_FORMAT: "invalid amount format: must be numeric",
    ParseErrorKind.NEGATIVE_AMOUNT: "invalid amount format: must be positive",
}


class ParseError(ValidationError):
    """Raised when a wire message violates a format rule."""

    def __init__(self, kind: ParseErrorKind, details: Optional[Dict[str, Any]] = None):
        super().__init__(PARSE_ERROR_MESSAGES[kind], details={"kind": kind.value, **(details or {})})
        self.kind = kind


class ConflictError(WireIntakeException):
    """Raised when a sequence number has already been recorded."""

    def __init__(self, seq: int):
        super().__init__(f"duplicate sequence number {seq}", details={"seq": seq})
        self.seq = seq


class NotFoundError(WireIntakeException):
    """Raised when a requested wire message does not exist."""
    pass


class AuthenticationError(WireIntakeException):
    """Raised when a caller cannot be authenticated."""
    pass


class InfrastructureError(WireIntakeException):
    """Raised when the persistence layer is unavailable or a query fails."""
    pass


class ConfigurationError(WireIntakeException):
    """Raised when configuration is invalid."""
    pass
