"""
Connectivity checks; the service echoes the query back.
"""

from ..core import Operation
from ..endpoints import Endpoint
from ..endpoints.headers import CONTENT_TYPE_JSON
from ..models.check import EchoArg, EchoResult
from ..service import ApiRequest


class CheckAppRequest(ApiRequest[EchoArg, EchoResult]):
    operation = Operation(
        endpoint=Endpoint.CHECK_APP,
        request_model=EchoArg,
        response_model=EchoResult,
        headers=(CONTENT_TYPE_JSON,),
    )


class CheckUserRequest(ApiRequest[EchoArg, EchoResult]):
    operation = Operation(
        endpoint=Endpoint.CHECK_USER,
        request_model=EchoArg,
        response_model=EchoResult,
        headers=(CONTENT_TYPE_JSON,),
    )
