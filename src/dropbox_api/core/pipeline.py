"""
Pure functions for the request pipeline.

Building the outgoing request and classifying the incoming response are
shared by the blocking and the non-blocking dispatch paths, so both paths
produce the same outcome for the same server behaviour.
"""

import json
from typing import Any, Dict, Optional, Type

import httpx
from pydantic import BaseModel, ValidationError

from ..config import Settings
from ..endpoints import TransportMode, get_endpoint_url
from ..endpoints.headers import declares_header, resolve_headers
from ..exceptions import DropboxError, ParsingError, RequestError
from .types import ApiResponse, Operation, PreparedRequest


def select_transport_mode(settings: Settings, asynchronous: bool) -> TransportMode:
    """Pick the URL variant for a dispatch path."""
    if not settings.test_mode:
        return TransportMode.PRODUCTION
    return TransportMode.TEST_ASYNC if asynchronous else TransportMode.TEST_SYNC


def serialize_payload(payload: Optional[BaseModel]) -> Optional[str]:
    """Serialize a payload to JSON once, with stable field order.

    Non-ASCII characters and DEL are escaped so the same string is valid both
    as a request body and as an HTTP header value.
    """
    if payload is None:
        return None
    serialized = json.dumps(
        payload.model_dump(mode="json", by_alias=True, exclude_none=True)
    )
    # ensure_ascii leaves DEL alone, but header values may not carry it
    return serialized.replace("\x7f", "\\u007f")


def build_auth_headers(access_token: str) -> Dict[str, str]:
    """Build authentication headers."""
    return {"Authorization": f"Bearer {access_token}"}


def prepare_request(
    operation: Operation,
    access_token: str,
    payload: Optional[BaseModel],
    settings: Settings,
    mode: TransportMode = TransportMode.PRODUCTION,
) -> PreparedRequest:
    """Resolve the URL, serialize the payload and attach headers and body."""
    url = get_endpoint_url(operation.endpoint, settings).for_mode(mode)

    serialized = serialize_payload(payload)

    headers = list(build_auth_headers(access_token).items())
    headers.extend(resolve_headers(operation.headers, serialized))

    body = None
    if serialized is not None:
        body = serialized.encode("utf-8")
        if not declares_header(operation.headers, "Content-Type"):
            headers.append(("Content-Type", "application/json"))

    return PreparedRequest(url=url, headers=headers, body=body)


def is_success_status(status_code: int) -> bool:
    return 200 <= status_code < 300


def extract_error_details(text: str) -> Dict[str, Any]:
    """Pull the Dropbox error envelope out of a failed response body, if any."""
    try:
        data = json.loads(text)
    except ValueError:
        return {}

    if not isinstance(data, dict):
        return {}

    return {
        key: data[key]
        for key in ("error_summary", "error", "user_message")
        if key in data
    }


def build_status_error(status_code: int, text: str) -> DropboxError:
    """Map a non-2xx response onto a DropboxError; the body is diagnostic only."""
    details = extract_error_details(text)
    summary = details.get("error_summary")
    reason = summary or text.strip() or httpx.codes.get_reason_phrase(status_code)

    return DropboxError(
        f"Dropbox error ({status_code}): {reason}",
        status_code=status_code,
        body=text,
        error_summary=summary,
        error=details.get("error"),
        details=details,
    )


def decode_payload(text: str, response_model: Type[BaseModel]) -> BaseModel:
    try:
        return response_model.model_validate_json(text)
    except ValidationError as exc:
        raise ParsingError(
            f"Failed to parse {response_model.__name__}: {exc}",
            body=text,
            details={"errors": exc.errors(include_url=False)},
        ) from exc


def classify_response(
    status_code: int, text: str, response_model: Type[BaseModel]
) -> Optional[ApiResponse]:
    """Turn a completed HTTP exchange into a result.

    Returns None for an empty 2xx body. Raises DropboxError for any non-2xx
    status before the body is looked at, and ParsingError when a 2xx body
    does not decode into ``response_model``.
    """
    if not is_success_status(status_code):
        raise build_status_error(status_code, text)

    if not text:
        return None

    return ApiResponse(payload=decode_payload(text, response_model))


def classify_request_exception(exception: Exception) -> str:
    """Classify a transport exception for error details."""
    if isinstance(exception, httpx.TimeoutException):
        return "timeout"
    elif isinstance(exception, httpx.NetworkError):
        return "network"
    elif isinstance(exception, httpx.ProtocolError):
        return "protocol"
    else:
        return "unknown"


def wrap_transport_error(exception: httpx.RequestError, url: str) -> RequestError:
    """Wrap a transport failure; nothing was received, so nothing is parsed."""
    kind = classify_request_exception(exception)
    return RequestError(
        f"Request to {url} failed ({type(exception).__name__}): {exception}",
        original=exception,
        details={"url": url, "kind": kind},
    )
