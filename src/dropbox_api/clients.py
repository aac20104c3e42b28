"""
HTTP clients shared by every call.

One blocking and one non-blocking httpx client are created lazily on first
use and reused afterwards. The non-blocking client belongs to the event loop
it was created on; a call from another loop gets a fresh client. The engine
only reads them.
"""

import asyncio
import threading
from typing import Optional

import httpx

from .config import Settings, get_settings, get_logger

logger = get_logger("clients")


def _running_loop() -> Optional[asyncio.AbstractEventLoop]:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


class HttpClients:
    """Pair of httpx clients used by the sync and async dispatch paths.

    Args:
        settings: Settings used for timeouts, user agent and URL resolution
        transport: Optional transport for the blocking client
        async_transport: Optional transport for the non-blocking client

    Example:
        >>> with HttpClients() as clients:
        ...     CheckAppRequest("token", EchoArg(query="ping")).call_sync(clients)
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
        async_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self._transport = transport
        self._async_transport = async_transport
        self._sync_client: Optional[httpx.Client] = None
        self._async_client: Optional[httpx.AsyncClient] = None
        self._async_loop: Optional[asyncio.AbstractEventLoop] = None
        self._lock = threading.Lock()

    def _client_options(self) -> dict:
        return {
            "timeout": httpx.Timeout(self.settings.timeout),
            "headers": {"User-Agent": self.settings.user_agent},
            "trust_env": self.settings.trust_env,
        }

    @property
    def sync_client(self) -> httpx.Client:
        """Get or create the blocking client."""
        if self._sync_client is None:
            with self._lock:
                if self._sync_client is None:
                    logger.debug("Creating blocking HTTP client")
                    self._sync_client = httpx.Client(
                        transport=self._transport, **self._client_options()
                    )
        return self._sync_client

    @property
    def async_client(self) -> httpx.AsyncClient:
        """Get or create the non-blocking client for the running event loop.

        Pooled connections cannot move between loops, so a client created on
        another loop is released and replaced.
        """
        loop = _running_loop()
        with self._lock:
            if self._async_client is not None and loop is not self._async_loop:
                logger.debug("Event loop changed, replacing non-blocking HTTP client")
                self._release_async_client()
            if self._async_client is None:
                logger.debug("Creating non-blocking HTTP client")
                self._async_client = httpx.AsyncClient(
                    transport=self._async_transport, **self._client_options()
                )
                self._async_loop = loop
        return self._async_client

    def _release_async_client(self) -> None:
        """Forget the non-blocking client, closing it on its own loop if possible."""
        client, loop = self._async_client, self._async_loop
        self._async_client = None
        self._async_loop = None
        if client is None or loop is None or loop.is_closed():
            # Connections of a closed loop are already unusable
            return
        if loop.is_running():
            asyncio.run_coroutine_threadsafe(client.aclose(), loop)
        elif _running_loop() is None:
            loop.run_until_complete(client.aclose())
        else:
            logger.debug("Dropping non-blocking HTTP client of an idle event loop")

    def close(self) -> None:
        """Close the blocking client and release the non-blocking one.

        When the non-blocking client's loop is running, its ``aclose`` is
        scheduled on that loop rather than awaited.
        """
        with self._lock:
            self._release_async_client()
        if self._sync_client is not None:
            self._sync_client.close()
            self._sync_client = None

    async def aclose(self) -> None:
        client = self._async_client
        if client is not None and self._async_loop is asyncio.get_running_loop():
            self._async_client = None
            self._async_loop = None
            await client.aclose()
        self.close()

    def __enter__(self) -> "HttpClients":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    async def __aenter__(self) -> "HttpClients":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()


_default_clients: Optional[HttpClients] = None
_default_lock = threading.Lock()


def default_clients() -> HttpClients:
    """Process-wide clients used when a call is not given its own."""
    global _default_clients
    if _default_clients is None:
        with _default_lock:
            if _default_clients is None:
                _default_clients = HttpClients()
    return _default_clients


def reset_default_clients() -> None:
    """Close the process-wide clients and forget them."""
    global _default_clients
    with _default_lock:
        if _default_clients is not None:
            _default_clients.close()
        _default_clients = None
