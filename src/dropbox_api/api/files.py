"""
Files namespace.

Routes on the content host take their argument in the ``Dropbox-API-Arg``
header, derived from the same JSON that is sent as the body. The
longpoll route is served by the notify host.
"""

from ..core import Operation
from ..endpoints import Endpoint
from ..endpoints.headers import (
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_OCTET_STREAM,
    DROPBOX_API_ARG,
)
from ..models.files import (
    CreateFolderArgs,
    CreateFolderBatchJobStatus,
    CreateFolderResult,
    DeleteArgs,
    DownloadZipArg,
    DownloadZipResult,
    ExportArgs,
    ExportResult,
    GetMetadataArgs,
    GetMetadataResult,
    GetTemporaryUploadLinkArgs,
    GetTemporaryUploadLinkResult,
    GetThumbnailBatchArg,
    GetThumbnailBatchResult,
    ListFolderArgs,
    ListFolderContinueArg,
    ListFolderGetLatestCursorResult,
    ListFolderLongpollArg,
    ListFolderLongpollResult,
    ListFolderResult,
    MetadataResult,
    PaperCreateArg,
    PaperCreateResult,
    PaperUpdateArg,
    PaperUpdateResult,
    PollArg,
    PreviewResult,
    RelocationArgs,
    ThumbnailV2Arg,
)
from ..service import ApiRequest


class CopyRequest(ApiRequest[RelocationArgs, MetadataResult]):
    operation = Operation(
        endpoint=Endpoint.FILES_COPY,
        request_model=RelocationArgs,
        response_model=MetadataResult,
        headers=(CONTENT_TYPE_JSON,),
    )


class CreateFolderRequest(ApiRequest[CreateFolderArgs, CreateFolderResult]):
    operation = Operation(
        endpoint=Endpoint.FILES_CREATE_FOLDER,
        request_model=CreateFolderArgs,
        response_model=CreateFolderResult,
        headers=(CONTENT_TYPE_JSON,),
    )


class CreateFolderBatchCheckRequest(ApiRequest[PollArg, CreateFolderBatchJobStatus]):
    operation = Operation(
        endpoint=Endpoint.FILES_CREATE_FOLDER_BATCH_CHECK,
        request_model=PollArg,
        response_model=CreateFolderBatchJobStatus,
        headers=(CONTENT_TYPE_JSON,),
    )


class DeleteRequest(ApiRequest[DeleteArgs, MetadataResult]):
    operation = Operation(
        endpoint=Endpoint.FILES_DELETE,
        request_model=DeleteArgs,
        response_model=MetadataResult,
        headers=(CONTENT_TYPE_JSON,),
    )


class DownloadZipRequest(ApiRequest[DownloadZipArg, DownloadZipResult]):
    operation = Operation(
        endpoint=Endpoint.FILES_DOWNLOAD_ZIP,
        request_model=DownloadZipArg,
        response_model=DownloadZipResult,
        headers=(DROPBOX_API_ARG,),
    )


class ExportRequest(ApiRequest[ExportArgs, ExportResult]):
    operation = Operation(
        endpoint=Endpoint.FILES_EXPORT,
        request_model=ExportArgs,
        response_model=ExportResult,
        headers=(DROPBOX_API_ARG,),
    )


class GetMetadataRequest(ApiRequest[GetMetadataArgs, GetMetadataResult]):
    operation = Operation(
        endpoint=Endpoint.FILES_GET_METADATA,
        request_model=GetMetadataArgs,
        response_model=GetMetadataResult,
        headers=(CONTENT_TYPE_JSON,),
    )


class GetTemporaryUploadLinkRequest(
    ApiRequest[GetTemporaryUploadLinkArgs, GetTemporaryUploadLinkResult]
):
    operation = Operation(
        endpoint=Endpoint.FILES_GET_TEMPORARY_UPLOAD_LINK,
        request_model=GetTemporaryUploadLinkArgs,
        response_model=GetTemporaryUploadLinkResult,
        headers=(CONTENT_TYPE_JSON,),
    )


class GetThumbnailRequest(ApiRequest[ThumbnailV2Arg, PreviewResult]):
    operation = Operation(
        endpoint=Endpoint.FILES_GET_THUMBNAIL,
        request_model=ThumbnailV2Arg,
        response_model=PreviewResult,
        headers=(DROPBOX_API_ARG,),
    )


class GetThumbnailBatchRequest(
    ApiRequest[GetThumbnailBatchArg, GetThumbnailBatchResult]
):
    operation = Operation(
        endpoint=Endpoint.FILES_GET_THUMBNAIL_BATCH,
        request_model=GetThumbnailBatchArg,
        response_model=GetThumbnailBatchResult,
        headers=(CONTENT_TYPE_JSON, DROPBOX_API_ARG),
    )


class ListFolderRequest(ApiRequest[ListFolderArgs, ListFolderResult]):
    operation = Operation(
        endpoint=Endpoint.FILES_LIST_FOLDER,
        request_model=ListFolderArgs,
        response_model=ListFolderResult,
        headers=(CONTENT_TYPE_JSON,),
    )


class ListFolderContinueRequest(ApiRequest[ListFolderContinueArg, ListFolderResult]):
    operation = Operation(
        endpoint=Endpoint.FILES_LIST_FOLDER_CONTINUE,
        request_model=ListFolderContinueArg,
        response_model=ListFolderResult,
        headers=(CONTENT_TYPE_JSON,),
    )


class ListFolderGetLatestCursorRequest(
    ApiRequest[ListFolderArgs, ListFolderGetLatestCursorResult]
):
    operation = Operation(
        endpoint=Endpoint.FILES_LIST_FOLDER_GET_LATEST_CURSOR,
        request_model=ListFolderArgs,
        response_model=ListFolderGetLatestCursorResult,
        headers=(CONTENT_TYPE_JSON,),
    )


class ListFolderLongpollRequest(
    ApiRequest[ListFolderLongpollArg, ListFolderLongpollResult]
):
    """Block until something changes below a cursor, up to ``timeout`` seconds."""

    operation = Operation(
        endpoint=Endpoint.FILES_LIST_FOLDER_LONGPOLL,
        request_model=ListFolderLongpollArg,
        response_model=ListFolderLongpollResult,
        headers=(CONTENT_TYPE_JSON,),
    )


class MoveRequest(ApiRequest[RelocationArgs, MetadataResult]):
    operation = Operation(
        endpoint=Endpoint.FILES_MOVE,
        request_model=RelocationArgs,
        response_model=MetadataResult,
        headers=(CONTENT_TYPE_JSON,),
    )


class PaperCreateRequest(ApiRequest[PaperCreateArg, PaperCreateResult]):
    operation = Operation(
        endpoint=Endpoint.FILES_PAPER_CREATE,
        request_model=PaperCreateArg,
        response_model=PaperCreateResult,
        headers=(CONTENT_TYPE_OCTET_STREAM, DROPBOX_API_ARG),
    )


class PaperUpdateRequest(ApiRequest[PaperUpdateArg, PaperUpdateResult]):
    operation = Operation(
        endpoint=Endpoint.FILES_PAPER_UPDATE,
        request_model=PaperUpdateArg,
        response_model=PaperUpdateResult,
        headers=(CONTENT_TYPE_OCTET_STREAM, DROPBOX_API_ARG),
    )
