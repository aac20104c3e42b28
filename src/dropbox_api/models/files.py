"""
Payloads of the files namespace.

Only the routes exposed in ``dropbox_api.api.files`` are modelled. Tagged
unions use the ``.tag`` discriminator the service sends.
"""

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import Field, RootModel

from .common import DropboxModel, PropertyGroup


# Metadata


class FileLockMetadata(DropboxModel):
    is_lockholder: Optional[bool] = None
    lockholder_name: Optional[str] = None
    created: Optional[str] = None


class FileMetadata(DropboxModel):
    tag: Literal["file"] = Field("file", alias=".tag")
    name: str
    id: str
    client_modified: str
    server_modified: str
    rev: str
    size: int
    path_lower: Optional[str] = None
    path_display: Optional[str] = None
    content_hash: Optional[str] = None
    is_downloadable: Optional[bool] = None
    has_explicit_shared_members: Optional[bool] = None
    property_groups: Optional[List[PropertyGroup]] = None
    file_lock_info: Optional[FileLockMetadata] = None


class FolderMetadata(DropboxModel):
    tag: Literal["folder"] = Field("folder", alias=".tag")
    name: str
    id: str
    path_lower: Optional[str] = None
    path_display: Optional[str] = None
    property_groups: Optional[List[PropertyGroup]] = None


class DeletedMetadata(DropboxModel):
    tag: Literal["deleted"] = Field("deleted", alias=".tag")
    name: str
    path_lower: Optional[str] = None
    path_display: Optional[str] = None


Metadata = Annotated[
    Union[FileMetadata, FolderMetadata, DeletedMetadata],
    Field(discriminator="tag"),
]


class GetMetadataArgs(DropboxModel):
    path: str
    include_media_info: Optional[bool] = None
    include_deleted: Optional[bool] = None
    include_has_explicit_shared_members: Optional[bool] = None


class GetMetadataResult(RootModel[Metadata]):
    pass


# files/create_folder_v2, files/create_folder_batch/check


class CreateFolderArgs(DropboxModel):
    path: str
    autorename: Optional[bool] = None


class CreateFolderResult(DropboxModel):
    metadata: FolderMetadata


class PollArg(DropboxModel):
    async_job_id: str


class CreateFolderEntrySuccess(DropboxModel):
    tag: Literal["success"] = Field("success", alias=".tag")
    metadata: FolderMetadata


class CreateFolderEntryFailure(DropboxModel):
    tag: Literal["failure"] = Field("failure", alias=".tag")
    failure: Dict[str, Any]


CreateFolderBatchResultEntry = Annotated[
    Union[CreateFolderEntrySuccess, CreateFolderEntryFailure],
    Field(discriminator="tag"),
]


class CreateFolderBatchComplete(DropboxModel):
    tag: Literal["complete"] = Field("complete", alias=".tag")
    entries: List[CreateFolderBatchResultEntry]


class CreateFolderBatchInProgress(DropboxModel):
    tag: Literal["in_progress"] = Field("in_progress", alias=".tag")


class CreateFolderBatchFailed(DropboxModel):
    tag: Literal["failed"] = Field("failed", alias=".tag")
    failed: Optional[Dict[str, Any]] = None


class CreateFolderBatchJobStatus(
    RootModel[
        Annotated[
            Union[
                CreateFolderBatchComplete,
                CreateFolderBatchInProgress,
                CreateFolderBatchFailed,
            ],
            Field(discriminator="tag"),
        ]
    ]
):
    pass


# files/delete_v2, files/copy_v2, files/move_v2


class DeleteArgs(DropboxModel):
    path: str
    parent_rev: Optional[str] = None


class RelocationArgs(DropboxModel):
    from_path: str
    to_path: str
    allow_shared_folder: Optional[bool] = None
    autorename: Optional[bool] = None
    allow_ownership_transfer: Optional[bool] = None


class MetadataResult(DropboxModel):
    metadata: Metadata


# files/download_zip, files/export


class DownloadZipArg(DropboxModel):
    path: str


class DownloadZipResult(DropboxModel):
    metadata: FolderMetadata


class ExportArgs(DropboxModel):
    path: str
    export_format: Optional[str] = None


class ExportMetadata(DropboxModel):
    name: str
    size: int
    export_hash: Optional[str] = None


class ExportResult(DropboxModel):
    export_metadata: ExportMetadata
    file_metadata: FileMetadata


# files/get_temporary_upload_link


class CommitInfo(DropboxModel):
    path: str
    mode: str = "add"
    autorename: bool = False
    client_modified: Optional[str] = None
    mute: bool = False
    property_groups: Optional[List[PropertyGroup]] = None
    strict_conflict: Optional[bool] = None


class GetTemporaryUploadLinkArgs(DropboxModel):
    commit_info: CommitInfo
    duration: float = 14400.0


class GetTemporaryUploadLinkResult(DropboxModel):
    link: str


# files/get_thumbnail_v2, files/get_thumbnail_batch


class ThumbnailFormat(str, Enum):
    JPEG = "jpeg"
    PNG = "png"
    WEBP = "webp"


class ThumbnailSize(str, Enum):
    W32H32 = "w32h32"
    W64H64 = "w64h64"
    W128H128 = "w128h128"
    W256H256 = "w256h256"
    W480H320 = "w480h320"
    W640H480 = "w640h480"
    W960H640 = "w960h640"
    W1024H768 = "w1024h768"
    W2048H1536 = "w2048h1536"


class ThumbnailMode(str, Enum):
    STRICT = "strict"
    BESTFIT = "bestfit"
    FITONE_BESTFIT = "fitone_bestfit"
    ORIGINAL = "original"


class ThumbnailQuality(str, Enum):
    QUALITY_80 = "quality_80"
    QUALITY_90 = "quality_90"


class ThumbnailArg(DropboxModel):
    path: str
    format: ThumbnailFormat = ThumbnailFormat.JPEG
    size: ThumbnailSize = ThumbnailSize.W64H64
    mode: ThumbnailMode = ThumbnailMode.STRICT
    quality: ThumbnailQuality = ThumbnailQuality.QUALITY_80


class GetThumbnailBatchArg(DropboxModel):
    entries: List[ThumbnailArg]


class ThumbnailBatchSuccess(DropboxModel):
    tag: Literal["success"] = Field("success", alias=".tag")
    metadata: FileMetadata
    thumbnail: str


class ThumbnailBatchFailure(DropboxModel):
    tag: Literal["failure"] = Field("failure", alias=".tag")
    failure: Dict[str, Any]


GetThumbnailBatchResultEntry = Annotated[
    Union[ThumbnailBatchSuccess, ThumbnailBatchFailure],
    Field(discriminator="tag"),
]


class GetThumbnailBatchResult(DropboxModel):
    entries: List[GetThumbnailBatchResultEntry]


class PathResource(DropboxModel):
    tag: Literal["path"] = Field("path", alias=".tag")
    path: str


class LinkResource(DropboxModel):
    tag: Literal["link"] = Field("link", alias=".tag")
    url: str
    path: Optional[str] = None
    password: Optional[str] = None


class ThumbnailV2Arg(DropboxModel):
    resource: Annotated[Union[PathResource, LinkResource], Field(discriminator="tag")]
    format: ThumbnailFormat = ThumbnailFormat.JPEG
    size: ThumbnailSize = ThumbnailSize.W64H64
    mode: ThumbnailMode = ThumbnailMode.STRICT
    quality: ThumbnailQuality = ThumbnailQuality.QUALITY_80


class MinimalFileLinkMetadata(DropboxModel):
    url: str
    rev: str
    id: Optional[str] = None
    path: Optional[str] = None


class PreviewResult(DropboxModel):
    file_metadata: Optional[FileMetadata] = None
    link_metadata: Optional[MinimalFileLinkMetadata] = None


# files/list_folder and friends


class SharedLink(DropboxModel):
    url: str
    password: Optional[str] = None


class ListFolderArgs(DropboxModel):
    path: str
    recursive: Optional[bool] = None
    include_media_info: Optional[bool] = None
    include_deleted: Optional[bool] = None
    include_has_explicit_shared_members: Optional[bool] = None
    include_mounted_folders: Optional[bool] = None
    limit: Optional[int] = None
    shared_link: Optional[SharedLink] = None
    include_non_downloadable_files: Optional[bool] = None


class ListFolderResult(DropboxModel):
    entries: List[Metadata]
    cursor: str
    has_more: bool


class ListFolderContinueArg(DropboxModel):
    cursor: str


class ListFolderGetLatestCursorResult(DropboxModel):
    cursor: str


class ListFolderLongpollArg(DropboxModel):
    cursor: str
    timeout: int = 30


class ListFolderLongpollResult(DropboxModel):
    changes: bool
    backoff: Optional[int] = None


# files/paper/create, files/paper/update


class PaperCreateArg(DropboxModel):
    path: str
    import_format: str


class PaperCreateResult(DropboxModel):
    url: str
    result_path: str
    file_id: str
    paper_revision: int


class PaperUpdateArg(DropboxModel):
    path: str
    import_format: str
    doc_update_policy: str
    paper_revision: Optional[int] = None


class PaperUpdateResult(DropboxModel):
    paper_revision: int
