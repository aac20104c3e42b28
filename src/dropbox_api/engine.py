"""
Request execution engine.

Both entry points run the same pipeline; they differ only in how the POST
is awaited.
"""

from typing import Optional

import httpx
from pydantic import BaseModel

from .clients import HttpClients
from .config import get_logger
from .core import (
    ApiResponse,
    Operation,
    classify_response,
    prepare_request,
    select_transport_mode,
    wrap_transport_error,
)

logger = get_logger("engine")


def execute_sync(
    operation: Operation,
    access_token: str,
    payload: Optional[BaseModel],
    clients: HttpClients,
) -> Optional[ApiResponse]:
    """Run one call on the calling thread, blocking until it completes."""
    settings = clients.settings
    prepared = prepare_request(
        operation,
        access_token,
        payload,
        settings,
        select_transport_mode(settings, asynchronous=False),
    )

    logger.debug("POST %s", prepared.url)
    try:
        response = clients.sync_client.post(
            prepared.url, headers=prepared.headers, content=prepared.body
        )
    except httpx.RequestError as e:
        raise wrap_transport_error(e, prepared.url) from e

    logger.debug("POST %s -> %d", prepared.url, response.status_code)
    return classify_response(
        response.status_code, response.text, operation.response_model
    )


async def execute_async(
    operation: Operation,
    access_token: str,
    payload: Optional[BaseModel],
    clients: HttpClients,
) -> Optional[ApiResponse]:
    """Run one call as a coroutine, suspending while the request is in flight."""
    settings = clients.settings
    prepared = prepare_request(
        operation,
        access_token,
        payload,
        settings,
        select_transport_mode(settings, asynchronous=True),
    )

    logger.debug("POST %s", prepared.url)
    try:
        response = await clients.async_client.post(
            prepared.url, headers=prepared.headers, content=prepared.body
        )
    except httpx.RequestError as e:
        raise wrap_transport_error(e, prepared.url) from e

    logger.debug("POST %s -> %d", prepared.url, response.status_code)
    return classify_response(
        response.status_code, response.text, operation.response_model
    )
