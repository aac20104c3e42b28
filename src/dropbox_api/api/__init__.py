"""
Request types, one module per API namespace.

Each class names a single ``Operation``; ``call_sync()`` and ``call()`` are
inherited from ``ApiRequest``.
"""

from . import (
    account,
    auth,
    check,
    contacts,
    file_properties,
    file_requests,
    files,
    openid,
    users,
)
from .check import CheckAppRequest, CheckUserRequest

__all__ = [
    "account",
    "auth",
    "check",
    "contacts",
    "file_properties",
    "file_requests",
    "files",
    "openid",
    "users",
    "CheckAppRequest",
    "CheckUserRequest",
]
