"""
Payloads of the file_requests namespace.
"""

from datetime import datetime
from typing import List, Optional, Union

from .common import DropboxModel, Tag


# A grace period is accepted both as a bare string and as a tagged object
GracePeriod = Union[str, Tag]


class FileRequestDeadline(DropboxModel):
    deadline: datetime
    allow_late_uploads: Optional[GracePeriod] = None


class FileRequest(DropboxModel):
    id: str
    url: str
    title: str
    created: datetime
    is_open: bool
    file_count: int
    destination: Optional[str] = None
    deadline: Optional[FileRequestDeadline] = None
    description: Optional[str] = None
    video_project_id: Optional[str] = None


class CountFileRequestsResult(DropboxModel):
    file_request_count: int


class CreateFileRequestArgs(DropboxModel):
    title: str
    destination: str
    deadline: Optional[FileRequestDeadline] = None
    open: bool = True
    description: Optional[str] = None
    video_project_id: Optional[str] = None


class DeleteFileRequestArgs(DropboxModel):
    ids: List[str]


class DeleteFileRequestsResult(DropboxModel):
    file_requests: List[FileRequest]


class GetFileRequestArgs(DropboxModel):
    id: str


class ListFileRequestsArgs(DropboxModel):
    limit: int = 1000


class ListFileRequestsResult(DropboxModel):
    file_requests: List[FileRequest]
    cursor: str
    has_more: bool


class ListFileRequestsContinueArgs(DropboxModel):
    cursor: str


class UpdateFileRequestArgs(DropboxModel):
    id: str
    title: Optional[str] = None
    destination: Optional[str] = None
    deadline: Optional[Union[FileRequestDeadline, Tag]] = None
    open: Optional[bool] = None
    description: Optional[str] = None
