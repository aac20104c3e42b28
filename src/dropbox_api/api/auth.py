from ..core import Operation
from ..endpoints import Endpoint
from ..endpoints.headers import CONTENT_TYPE_JSON
from ..models.common import Void
from ..service import ApiRequest


class TokenRevokeRequest(ApiRequest[Void, Void]):
    """Revoke the access token the request is made with."""

    operation = Operation(
        endpoint=Endpoint.AUTH_TOKEN_REVOKE,
        response_model=Void,
        headers=(CONTENT_TYPE_JSON,),
    )
