"""
Request types.

Every API operation is a small subclass of ``ApiRequest`` that only names its
``Operation``. The two entry points are inherited:

    >>> request = CheckAppRequest("token", EchoArg(query="foo"))
    >>> response = request.call_sync()
    >>> response.payload.result
    'foo'

    >>> task = request.call()      # inside a running event loop
    >>> response = await task
"""

import asyncio
from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, Optional, TypeVar

from pydantic import BaseModel

from .clients import HttpClients, default_clients
from .core import ApiResponse, Operation
from .engine import execute_async, execute_sync
from .exceptions import RequestError

P = TypeVar("P", bound=BaseModel)
R = TypeVar("R", bound=BaseModel)


@dataclass(frozen=True)
class ApiRequest(Generic[P, R]):
    """
    Access token plus optional payload for one call.

    A plain ``dict`` payload is validated into the operation's request model.

    Attributes:
        access_token: Bearer token sent in the Authorization header
        payload: Request payload, None when the call takes no arguments
    """

    operation: ClassVar[Operation]

    access_token: str = field(repr=False)
    payload: Optional[Any] = None

    def __post_init__(self) -> None:
        model = self.operation.request_model
        if self.payload is None:
            return
        if model is None:
            raise TypeError(
                f"{type(self).__name__} takes no payload, "
                f"got {type(self.payload).__name__}"
            )
        if isinstance(self.payload, dict):
            object.__setattr__(self, "payload", model.model_validate(self.payload))
        elif not isinstance(self.payload, model):
            raise TypeError(
                f"{type(self).__name__} expects a {model.__name__} payload, "
                f"got {type(self.payload).__name__}"
            )

    def call_sync(
        self, clients: Optional[HttpClients] = None
    ) -> Optional[ApiResponse[R]]:
        """Execute the call, blocking the calling thread.

        Returns None when the service answered with an empty body.
        """
        return execute_sync(
            self.operation,
            self.access_token,
            self.payload,
            clients or default_clients(),
        )

    def call(
        self, clients: Optional[HttpClients] = None
    ) -> "asyncio.Task[Optional[ApiResponse[R]]]":
        """Start the call on the running event loop and return its task.

        The task can be awaited or cancelled. Cancelling only stops the local
        wait; a request already on the wire is not recalled.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError as e:
            raise RequestError(
                f"{type(self).__name__}.call() requires a running event loop",
                original=e,
            ) from e

        return loop.create_task(
            execute_async(
                self.operation,
                self.access_token,
                self.payload,
                clients or default_clients(),
            )
        )


__all__ = ["ApiRequest", "ApiResponse", "Operation"]
