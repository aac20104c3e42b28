from ..core import Operation
from ..endpoints import Endpoint
from ..endpoints.headers import CONTENT_TYPE_JSON
from ..models.common import Void
from ..models.users import (
    BasicAccount,
    FullAccount,
    GetAccountArg,
    SpaceUsage,
    UserFeaturesGetValuesBatchArg,
    UserFeaturesGetValuesBatchResult,
)
from ..service import ApiRequest


class FeaturesGetValuesRequest(
    ApiRequest[UserFeaturesGetValuesBatchArg, UserFeaturesGetValuesBatchResult]
):
    operation = Operation(
        endpoint=Endpoint.USERS_FEATURES_GET_VALUES,
        request_model=UserFeaturesGetValuesBatchArg,
        response_model=UserFeaturesGetValuesBatchResult,
        headers=(CONTENT_TYPE_JSON,),
    )


class GetAccountRequest(ApiRequest[GetAccountArg, BasicAccount]):
    operation = Operation(
        endpoint=Endpoint.USERS_GET_ACCOUNT,
        request_model=GetAccountArg,
        response_model=BasicAccount,
        headers=(CONTENT_TYPE_JSON,),
    )


class GetCurrentAccountRequest(ApiRequest[Void, FullAccount]):
    operation = Operation(
        endpoint=Endpoint.USERS_GET_CURRENT_ACCOUNT,
        response_model=FullAccount,
        headers=(CONTENT_TYPE_JSON,),
    )


class GetSpaceUsageRequest(ApiRequest[Void, SpaceUsage]):
    operation = Operation(
        endpoint=Endpoint.USERS_GET_SPACE_USAGE,
        response_model=SpaceUsage,
        headers=(CONTENT_TYPE_JSON,),
    )
