"""
File requests: links that let others upload into a folder.

``file_requests/delete`` is sent without a Content-Type declaration; the
engine still labels the JSON body it attaches.
"""

from ..core import Operation
from ..endpoints import Endpoint
from ..endpoints.headers import CONTENT_TYPE_JSON
from ..models.common import Void
from ..models.file_requests import (
    CountFileRequestsResult,
    CreateFileRequestArgs,
    DeleteFileRequestArgs,
    DeleteFileRequestsResult,
    FileRequest,
    GetFileRequestArgs,
    ListFileRequestsArgs,
    ListFileRequestsContinueArgs,
    ListFileRequestsResult,
    UpdateFileRequestArgs,
)
from ..service import ApiRequest


class CountFileRequestsRequest(ApiRequest[Void, CountFileRequestsResult]):
    operation = Operation(
        endpoint=Endpoint.FILE_REQUESTS_COUNT,
        response_model=CountFileRequestsResult,
        headers=(CONTENT_TYPE_JSON,),
    )


class CreateFileRequestRequest(ApiRequest[CreateFileRequestArgs, FileRequest]):
    operation = Operation(
        endpoint=Endpoint.FILE_REQUESTS_CREATE,
        request_model=CreateFileRequestArgs,
        response_model=FileRequest,
        headers=(CONTENT_TYPE_JSON,),
    )


class DeleteFileRequestRequest(
    ApiRequest[DeleteFileRequestArgs, DeleteFileRequestsResult]
):
    operation = Operation(
        endpoint=Endpoint.FILE_REQUESTS_DELETE,
        request_model=DeleteFileRequestArgs,
        response_model=DeleteFileRequestsResult,
    )


class DeleteAllClosedFileRequestsRequest(ApiRequest[Void, DeleteFileRequestsResult]):
    operation = Operation(
        endpoint=Endpoint.FILE_REQUESTS_DELETE_ALL_CLOSED,
        response_model=DeleteFileRequestsResult,
        headers=(CONTENT_TYPE_JSON,),
    )


class GetFileRequestRequest(ApiRequest[GetFileRequestArgs, FileRequest]):
    operation = Operation(
        endpoint=Endpoint.FILE_REQUESTS_GET,
        request_model=GetFileRequestArgs,
        response_model=FileRequest,
        headers=(CONTENT_TYPE_JSON,),
    )


class ListFileRequestsRequest(
    ApiRequest[ListFileRequestsArgs, ListFileRequestsResult]
):
    operation = Operation(
        endpoint=Endpoint.FILE_REQUESTS_LIST,
        request_model=ListFileRequestsArgs,
        response_model=ListFileRequestsResult,
        headers=(CONTENT_TYPE_JSON,),
    )


class ListFileRequestsContinueRequest(
    ApiRequest[ListFileRequestsContinueArgs, ListFileRequestsResult]
):
    operation = Operation(
        endpoint=Endpoint.FILE_REQUESTS_LIST_CONTINUE,
        request_model=ListFileRequestsContinueArgs,
        response_model=ListFileRequestsResult,
        headers=(CONTENT_TYPE_JSON,),
    )


class UpdateFileRequestRequest(ApiRequest[UpdateFileRequestArgs, FileRequest]):
    operation = Operation(
        endpoint=Endpoint.FILE_REQUESTS_UPDATE,
        request_model=UpdateFileRequestArgs,
        response_model=FileRequest,
        headers=(CONTENT_TYPE_JSON,),
    )
