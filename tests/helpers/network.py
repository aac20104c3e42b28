import asyncio
from typing import Callable, List, Optional

import httpx

from dropbox_api.clients import HttpClients
from dropbox_api.config import Settings


Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it was given."""

    def __init__(self, handler: Handler):
        self.requests: List[httpx.Request] = []

        def record(request: httpx.Request):
            self.requests.append(request)
            return handler(request)

        super().__init__(record)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


def respond(status_code: int = 200, text: str = "") -> Handler:
    """Handler answering every request with the same status and body text."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=text)

    return handler


def fail_with(exception: Exception) -> Handler:
    """Handler simulating a transport failure before any response arrives."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise exception

    return handler


def hang(seconds: float = 10.0):
    """Async handler that never answers within a test's lifetime."""

    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(seconds)
        return httpx.Response(200, text="")

    return handler


def make_clients(
    handler, settings: Optional[Settings] = None
) -> HttpClients:
    """HttpClients whose sync and async paths both go through ``handler``."""
    return HttpClients(
        settings=settings or Settings(test_mode=False),
        transport=RecordingTransport(handler),
        async_transport=RecordingTransport(handler),
    )


def recorded(clients: HttpClients, asynchronous: bool = False) -> List[httpx.Request]:
    transport = clients._async_transport if asynchronous else clients._transport
    return transport.requests
