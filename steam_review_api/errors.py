"""Type-safe exception hierarchy and error codes.

Provides structured error handling with:
- Machine-readable error codes
- Structured error details for logging and reporting
- A stateless marker for unlisted languages
- Contextual decode errors naming the record and field that failed
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """Type-safe error codes."""

    UNKNOWN_LANGUAGE = "unknown_language"
    FIELD_DECODE_FAILED = "field_decode_failed"
    MALFORMED_PAYLOAD = "malformed_payload"


class ErrorDetail(BaseModel):
    """Structured error information."""

    code: ErrorCode
    message: str
    field: Optional[str] = None
    record: Optional[str] = None
    context: dict = Field(default_factory=dict)


class SteamReviewError(Exception):
    """Base exception for all package errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        field: Optional[str] = None,
        record: Optional[str] = None,
        **context
    ):
        self.code = code
        self.message = message
        self.field = field
        self.record = record
        self.context = context
        super().__init__(message)

    def to_detail(self) -> ErrorDetail:
        """Convert to error detail."""
        return ErrorDetail(
            code=self.code,
            message=self.message,
            field=self.field,
            record=self.record,
            context=self.context
        )


# ═════════════════════════════════════════════════════════════════════════════
# Parse Errors
# ═════════════════════════════════════════════════════════════════════════════

class LangParseError(SteamReviewError, ValueError):
    """Tried to parse a language missing from the catalog.

    Stateless: the offending string is not kept. Valve adding a language
    is the usual cause, so the message asks for a report instead.
    """

    MESSAGE = (
        "Tried to parse an unlisted language. "
        "Please report! Valve probably added new languages since the "
        "catalog was last updated."
    )

    def __init__(self):
        super().__init__(
            code=ErrorCode.UNKNOWN_LANGUAGE,
            message=self.MESSAGE
        )


# ═════════════════════════════════════════════════════════════════════════════
# Decode Errors
# ═════════════════════════════════════════════════════════════════════════════

class DecodeError(SteamReviewError):
    """A record could not be decoded from its wire form."""

    def __init__(
        self,
        record: str,
        field: Optional[str],
        reason: str,
        code: ErrorCode = ErrorCode.FIELD_DECODE_FAILED,
        **context
    ):
        location = f"{record}.{field}" if field else record
        super().__init__(
            code=code,
            message=f"Failed to decode {location}: {reason}",
            field=field,
            record=record,
            **context
        )


class PayloadError(DecodeError):
    """Payload is not a JSON object."""

    def __init__(self, record: str, reason: str):
        super().__init__(
            record=record,
            field=None,
            reason=reason,
            code=ErrorCode.MALFORMED_PAYLOAD
        )
