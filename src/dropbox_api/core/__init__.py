"""
Core pure functions for the SDK.

This package contains the I/O-free steps of the request pipeline and the
value types passed between them.
"""

from .pipeline import (
    select_transport_mode,
    serialize_payload,
    build_auth_headers,
    prepare_request,
    is_success_status,
    extract_error_details,
    build_status_error,
    decode_payload,
    classify_response,
    classify_request_exception,
    wrap_transport_error,
)

from .types import ApiResponse, Operation, PreparedRequest

__all__ = [
    "select_transport_mode",
    "serialize_payload",
    "build_auth_headers",
    "prepare_request",
    "is_success_status",
    "extract_error_details",
    "build_status_error",
    "decode_payload",
    "classify_response",
    "classify_request_exception",
    "wrap_transport_error",
    "ApiResponse",
    "Operation",
    "PreparedRequest",
]
