"""
Error Taxonomy

Python exceptions raised by the client, and the Pydantic model used to
report them in structured form.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """
    Numeric transport error codes.

    The values match libcurl's CURLcode numbering so that callers used to
    cURL diagnostics can read them as-is.
    """

    OK = 0
    UNSUPPORTED_PROTOCOL = 1
    URL_MALFORMAT = 3
    COULDNT_RESOLVE_PROXY = 5
    COULDNT_CONNECT = 7
    OPERATION_TIMEDOUT = 28
    SSL_CONNECT_ERROR = 35
    TOO_MANY_REDIRECTS = 47
    UNKNOWN_OPTION = 48
    RECV_ERROR = 56


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class TransportErrorModel(BaseModel):
    """Structured form of a transport failure."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    code: int = Field(
        ...,
        description="Native numeric error code reported by the transport",
        examples=[ErrorCodes.COULDNT_CONNECT],
    )
    message: str = Field(
        ...,
        description="Native diagnostic message reported by the transport",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the failure",
    )

    def to_exception(self) -> "TransportError":
        """Convert this error model to a raisable exception."""
        return TransportError(self.message, self.code, details=self.details)


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class CurlishException(Exception):
    """Base exception for all curlish errors."""

    def __init__(
        self,
        message: str,
        code: int = ErrorCodes.OK,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class TransportError(CurlishException):
    """
    Raised when the transport produced no output.

    `message` and `code` are the transport's own diagnostics, passed
    through verbatim.
    """

    def to_error_model(self) -> TransportErrorModel:
        """Convert this exception to a TransportErrorModel."""
        return TransportErrorModel(
            code=self.code,
            message=self.message,
            details=self.details,
        )
