"""
Exceptions raised by the request execution engine.

Exactly three concrete kinds exist. They are checked in a fixed order:
a transport failure pre-empts the status check, and a failed status
pre-empts body parsing.
"""

from typing import Dict, Any, Optional


class ApiError(Exception):
    """Base exception for every failure surfaced by an API call."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class RequestError(ApiError):
    """Raised when the call could not be dispatched or completed by the transport."""

    def __init__(
        self,
        message: str,
        original: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.original = original


class ParsingError(ApiError):
    """Raised when a successful response body does not decode into the result type."""

    def __init__(
        self,
        message: str,
        body: str = "",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.body = body


class DropboxError(ApiError):
    """Raised when the remote service answers with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str = "",
        error_summary: Optional[str] = None,
        error: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.status_code = status_code
        self.body = body
        self.error_summary = error_summary
        self.error = error


RemoteServiceError = DropboxError
