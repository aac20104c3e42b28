from ..core import Operation
from ..endpoints import Endpoint
from ..endpoints.headers import CONTENT_TYPE_JSON
from ..models.account import SetProfilePhotoArg, SetProfilePhotoResult
from ..service import ApiRequest


class SetProfilePhotoRequest(ApiRequest[SetProfilePhotoArg, SetProfilePhotoResult]):
    operation = Operation(
        endpoint=Endpoint.ACCOUNT_SET_PROFILE_PHOTO,
        request_model=SetProfilePhotoArg,
        response_model=SetProfilePhotoResult,
        headers=(CONTENT_TYPE_JSON,),
    )
