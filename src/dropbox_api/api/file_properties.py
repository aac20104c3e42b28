"""
Custom properties attached to files and the templates that describe them.
"""

from ..core import Operation
from ..endpoints import Endpoint
from ..endpoints.headers import CONTENT_TYPE_JSON
from ..models.common import Void
from ..models.file_properties import (
    AddTemplateArg,
    AddTemplateResult,
    GetTemplateArg,
    GetTemplateResult,
    ListTemplateResult,
    PathWithPropertyGroupsArg,
    PropertiesSearchArg,
    PropertiesSearchContinueArg,
    PropertiesSearchResult,
    RemovePropertiesArg,
    RemoveTemplateArg,
    UpdatePropertiesArg,
    UpdateTemplateArg,
    UpdateTemplateResult,
)
from ..service import ApiRequest


class PropertiesAddRequest(ApiRequest[PathWithPropertyGroupsArg, Void]):
    operation = Operation(
        endpoint=Endpoint.FILE_PROPERTIES_PROPERTIES_ADD,
        request_model=PathWithPropertyGroupsArg,
        response_model=Void,
        headers=(CONTENT_TYPE_JSON,),
    )


class PropertiesOverwriteRequest(ApiRequest[PathWithPropertyGroupsArg, Void]):
    operation = Operation(
        endpoint=Endpoint.FILE_PROPERTIES_PROPERTIES_OVERWRITE,
        request_model=PathWithPropertyGroupsArg,
        response_model=Void,
        headers=(CONTENT_TYPE_JSON,),
    )


class PropertiesRemoveRequest(ApiRequest[RemovePropertiesArg, Void]):
    operation = Operation(
        endpoint=Endpoint.FILE_PROPERTIES_PROPERTIES_REMOVE,
        request_model=RemovePropertiesArg,
        response_model=Void,
        headers=(CONTENT_TYPE_JSON,),
    )


class PropertiesSearchRequest(
    ApiRequest[PropertiesSearchArg, PropertiesSearchResult]
):
    operation = Operation(
        endpoint=Endpoint.FILE_PROPERTIES_PROPERTIES_SEARCH,
        request_model=PropertiesSearchArg,
        response_model=PropertiesSearchResult,
        headers=(CONTENT_TYPE_JSON,),
    )


class PropertiesSearchContinueRequest(
    ApiRequest[PropertiesSearchContinueArg, PropertiesSearchResult]
):
    operation = Operation(
        endpoint=Endpoint.FILE_PROPERTIES_PROPERTIES_SEARCH_CONTINUE,
        request_model=PropertiesSearchContinueArg,
        response_model=PropertiesSearchResult,
        headers=(CONTENT_TYPE_JSON,),
    )


class PropertiesUpdateRequest(ApiRequest[UpdatePropertiesArg, Void]):
    operation = Operation(
        endpoint=Endpoint.FILE_PROPERTIES_PROPERTIES_UPDATE,
        request_model=UpdatePropertiesArg,
        response_model=Void,
        headers=(CONTENT_TYPE_JSON,),
    )


class TemplatesAddForUserRequest(ApiRequest[AddTemplateArg, AddTemplateResult]):
    operation = Operation(
        endpoint=Endpoint.FILE_PROPERTIES_TEMPLATES_ADD_FOR_USER,
        request_model=AddTemplateArg,
        response_model=AddTemplateResult,
        headers=(CONTENT_TYPE_JSON,),
    )


class TemplatesGetForUserRequest(ApiRequest[GetTemplateArg, GetTemplateResult]):
    operation = Operation(
        endpoint=Endpoint.FILE_PROPERTIES_TEMPLATES_GET_FOR_USER,
        request_model=GetTemplateArg,
        response_model=GetTemplateResult,
        headers=(CONTENT_TYPE_JSON,),
    )


class TemplatesListForUserRequest(ApiRequest[Void, ListTemplateResult]):
    operation = Operation(
        endpoint=Endpoint.FILE_PROPERTIES_TEMPLATES_LIST_FOR_USER,
        response_model=ListTemplateResult,
        headers=(CONTENT_TYPE_JSON,),
    )


class TemplatesRemoveForUserRequest(ApiRequest[RemoveTemplateArg, Void]):
    operation = Operation(
        endpoint=Endpoint.FILE_PROPERTIES_TEMPLATES_REMOVE_FOR_USER,
        request_model=RemoveTemplateArg,
        response_model=Void,
        headers=(CONTENT_TYPE_JSON,),
    )


class TemplatesUpdateForUserRequest(
    ApiRequest[UpdateTemplateArg, UpdateTemplateResult]
):
    operation = Operation(
        endpoint=Endpoint.FILE_PROPERTIES_TEMPLATES_UPDATE_FOR_USER,
        request_model=UpdateTemplateArg,
        response_model=UpdateTemplateResult,
        headers=(CONTENT_TYPE_JSON,),
    )
