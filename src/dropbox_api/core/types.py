"""
Value types shared by the pipeline, the engine and the request classes.
"""

from dataclasses import dataclass
from typing import Generic, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel

from ..endpoints import Endpoint
from ..endpoints.headers import HeaderSpec

R = TypeVar("R", bound=BaseModel)


@dataclass(frozen=True)
class Operation:
    """
    Static description of one API operation.

    Pairs an endpoint with the payload model sent to it, the result model
    decoded from a non-empty success body, and the headers it requires.

    Attributes:
        endpoint: Endpoint the operation is dispatched to
        response_model: Model decoded from a non-empty 2xx body
        request_model: Model of the request payload, None for argument-less routes
        headers: Ordered header declarations, static or derived

    Example:
        >>> Operation(
        ...     endpoint=Endpoint.CHECK_APP,
        ...     request_model=EchoArg,
        ...     response_model=EchoResult,
        ...     headers=(CONTENT_TYPE_JSON,),
        ... )
    """

    endpoint: Endpoint
    response_model: Type[BaseModel]
    request_model: Optional[Type[BaseModel]] = None
    headers: HeaderSpec = ()


@dataclass(frozen=True)
class ApiResponse(Generic[R]):
    """Decoded result of a call whose response body was not empty."""

    payload: R


@dataclass(frozen=True)
class PreparedRequest:
    """Everything needed to dispatch one POST, identical for both modes."""

    url: str
    headers: List[Tuple[str, str]]
    body: Optional[bytes] = None
