"""
Dropbox API

Python client for the Dropbox API v2.
"""

from .clients import HttpClients, default_clients, reset_default_clients
from .config import Settings, get_settings, setup_logging
from .core import ApiResponse, Operation
from .endpoints import Endpoint, Host, TransportMode, get_endpoint_url, resolve
from .exceptions import (
    ApiError,
    DropboxError,
    ParsingError,
    RemoteServiceError,
    RequestError,
)
from .service import ApiRequest

__version__ = "0.1.0"

__all__ = [
    "ApiRequest",
    "ApiResponse",
    "Operation",
    "HttpClients",
    "default_clients",
    "reset_default_clients",
    "Settings",
    "get_settings",
    "setup_logging",
    "Endpoint",
    "Host",
    "TransportMode",
    "get_endpoint_url",
    "resolve",
    "ApiError",
    "RequestError",
    "ParsingError",
    "DropboxError",
    "RemoteServiceError",
]
