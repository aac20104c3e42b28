from ..core import Operation
from ..endpoints import Endpoint
from ..endpoints.headers import CONTENT_TYPE_JSON
from ..models.openid import UserInfoArgs, UserInfoResult
from ..service import ApiRequest


class UserInfoRequest(ApiRequest[UserInfoArgs, UserInfoResult]):
    operation = Operation(
        endpoint=Endpoint.OPENID_USERINFO,
        request_model=UserInfoArgs,
        response_model=UserInfoResult,
        headers=(CONTENT_TYPE_JSON,),
    )
