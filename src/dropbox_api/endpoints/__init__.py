"""
Endpoint registry.

Every API operation is named by an ``Endpoint`` member whose value is the
host class and the path below ``/2/``. Resolution is pure: the production
URL is derived from the member itself, and in test mode the same URL is
rewritten onto the loopback sync and async transports.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import httpx

from ..config import Settings, get_settings


API_VERSION = "2"


class Host(str, Enum):
    """Host classes of the Dropbox API."""

    API = "api.dropboxapi.com"
    CONTENT = "content.dropboxapi.com"
    NOTIFY = "notify.dropboxapi.com"


class TransportMode(str, Enum):
    PRODUCTION = "production"
    TEST_SYNC = "test_sync"
    TEST_ASYNC = "test_async"


class Endpoint(Enum):
    """Closed set of API operations."""

    # account
    ACCOUNT_SET_PROFILE_PHOTO = (Host.API, "account/set_profile_photo")

    # auth
    AUTH_TOKEN_REVOKE = (Host.API, "auth/token/revoke")

    # check
    CHECK_APP = (Host.API, "check/app")
    CHECK_USER = (Host.API, "check/user")

    # contacts
    CONTACTS_DELETE_MANUAL_CONTACTS = (Host.API, "contacts/delete_manual_contacts")
    CONTACTS_DELETE_MANUAL_CONTACTS_BATCH = (
        Host.API,
        "contacts/delete_manual_contacts_batch",
    )

    # file_properties
    FILE_PROPERTIES_PROPERTIES_ADD = (Host.API, "file_properties/properties/add")
    FILE_PROPERTIES_PROPERTIES_OVERWRITE = (
        Host.API,
        "file_properties/properties/overwrite",
    )
    FILE_PROPERTIES_PROPERTIES_REMOVE = (Host.API, "file_properties/properties/remove")
    FILE_PROPERTIES_PROPERTIES_SEARCH = (Host.API, "file_properties/properties/search")
    FILE_PROPERTIES_PROPERTIES_SEARCH_CONTINUE = (
        Host.API,
        "file_properties/properties/search/continue",
    )
    FILE_PROPERTIES_PROPERTIES_UPDATE = (Host.API, "file_properties/properties/update")
    FILE_PROPERTIES_TEMPLATES_ADD_FOR_USER = (
        Host.API,
        "file_properties/templates/add_for_user",
    )
    FILE_PROPERTIES_TEMPLATES_GET_FOR_USER = (
        Host.API,
        "file_properties/templates/get_for_user",
    )
    FILE_PROPERTIES_TEMPLATES_LIST_FOR_USER = (
        Host.API,
        "file_properties/templates/list_for_user",
    )
    FILE_PROPERTIES_TEMPLATES_REMOVE_FOR_USER = (
        Host.API,
        "file_properties/templates/remove_for_user",
    )
    FILE_PROPERTIES_TEMPLATES_UPDATE_FOR_USER = (
        Host.API,
        "file_properties/templates/update_for_user",
    )

    # file_requests
    FILE_REQUESTS_COUNT = (Host.API, "file_requests/count")
    FILE_REQUESTS_CREATE = (Host.API, "file_requests/create")
    FILE_REQUESTS_DELETE = (Host.API, "file_requests/delete")
    FILE_REQUESTS_DELETE_ALL_CLOSED = (Host.API, "file_requests/delete_all_closed")
    FILE_REQUESTS_GET = (Host.API, "file_requests/get")
    FILE_REQUESTS_LIST = (Host.API, "file_requests/list_v2")
    FILE_REQUESTS_LIST_CONTINUE = (Host.API, "file_requests/list/continue")
    FILE_REQUESTS_UPDATE = (Host.API, "file_requests/update")

    # files
    FILES_COPY = (Host.API, "files/copy_v2")
    FILES_COPY_BATCH = (Host.API, "files/copy_batch_v2")
    FILES_COPY_BATCH_CHECK = (Host.API, "files/copy_batch/check_v2")
    FILES_COPY_REFERENCE_GET = (Host.API, "files/copy_reference/get")
    FILES_COPY_REFERENCE_SAVE = (Host.API, "files/copy_reference/save")
    FILES_CREATE_FOLDER = (Host.API, "files/create_folder_v2")
    FILES_CREATE_FOLDER_BATCH = (Host.API, "files/create_folder_batch")
    FILES_CREATE_FOLDER_BATCH_CHECK = (Host.API, "files/create_folder_batch/check")
    FILES_DELETE = (Host.API, "files/delete_v2")
    FILES_DELETE_BATCH = (Host.API, "files/delete_batch")
    FILES_DELETE_BATCH_CHECK = (Host.API, "files/delete_batch/check")
    FILES_DOWNLOAD = (Host.CONTENT, "files/download")
    FILES_DOWNLOAD_ZIP = (Host.CONTENT, "files/download_zip")
    FILES_EXPORT = (Host.CONTENT, "files/export")
    FILES_GET_FILE_LOCK_BATCH = (Host.API, "files/get_file_lock_batch")
    FILES_GET_METADATA = (Host.API, "files/get_metadata")
    FILES_GET_PREVIEW = (Host.CONTENT, "files/get_preview")
    FILES_GET_TEMPORARY_LINK = (Host.API, "files/get_temporary_link")
    FILES_GET_TEMPORARY_UPLOAD_LINK = (Host.API, "files/get_temporary_upload_link")
    FILES_GET_THUMBNAIL = (Host.CONTENT, "files/get_thumbnail_v2")
    FILES_GET_THUMBNAIL_BATCH = (Host.CONTENT, "files/get_thumbnail_batch")
    FILES_LIST_FOLDER = (Host.API, "files/list_folder")
    FILES_LIST_FOLDER_CONTINUE = (Host.API, "files/list_folder/continue")
    FILES_LIST_FOLDER_GET_LATEST_CURSOR = (
        Host.API,
        "files/list_folder/get_latest_cursor",
    )
    FILES_LIST_FOLDER_LONGPOLL = (Host.NOTIFY, "files/list_folder/longpoll")
    FILES_LIST_REVISIONS = (Host.API, "files/list_revisions")
    FILES_LOCK_FILE_BATCH = (Host.API, "files/lock_file_batch")
    FILES_MOVE = (Host.API, "files/move_v2")
    FILES_MOVE_BATCH = (Host.API, "files/move_batch_v2")
    FILES_MOVE_BATCH_CHECK = (Host.API, "files/move_batch/check_v2")
    FILES_PAPER_CREATE = (Host.API, "files/paper/create")
    FILES_PAPER_UPDATE = (Host.API, "files/paper/update")
    FILES_PERMANENTLY_DELETE = (Host.API, "files/permanently_delete")
    FILES_RESTORE = (Host.API, "files/restore")
    FILES_SAVE_URL = (Host.API, "files/save_url")
    FILES_SAVE_URL_CHECK_JOB_STATUS = (Host.API, "files/save_url/check_job_status")
    FILES_SEARCH = (Host.API, "files/search_v2")
    FILES_SEARCH_CONTINUE = (Host.API, "files/search/continue_v2")
    FILES_TAGS_ADD = (Host.API, "files/tags/add")
    FILES_TAGS_GET = (Host.API, "files/tags/get")
    FILES_TAGS_REMOVE = (Host.API, "files/tags/remove")
    FILES_UNLOCK_FILE_BATCH = (Host.API, "files/unlock_file_batch")
    FILES_UPLOAD = (Host.CONTENT, "files/upload")
    FILES_UPLOAD_SESSION_APPEND = (Host.CONTENT, "files/upload_session/append_v2")
    FILES_UPLOAD_SESSION_APPEND_BATCH = (
        Host.CONTENT,
        "files/upload_session/append_batch",
    )
    FILES_UPLOAD_SESSION_FINISH = (Host.CONTENT, "files/upload_session/finish")
    FILES_UPLOAD_SESSION_FINISH_BATCH = (
        Host.API,
        "files/upload_session/finish_batch_v2",
    )
    FILES_UPLOAD_SESSION_FINISH_BATCH_CHECK = (
        Host.API,
        "files/upload_session/finish_batch/check",
    )
    FILES_UPLOAD_SESSION_START = (Host.CONTENT, "files/upload_session/start")
    FILES_UPLOAD_SESSION_START_BATCH = (Host.API, "files/upload_session/start_batch")

    # openid
    OPENID_USERINFO = (Host.API, "openid/userinfo")

    # sharing
    SHARING_ADD_FILE_MEMBER = (Host.API, "sharing/add_file_member")
    SHARING_ADD_FOLDER_MEMBER = (Host.API, "sharing/add_folder_member")
    SHARING_CHECK_JOB_STATUS = (Host.API, "sharing/check_job_status")
    SHARING_CHECK_REMOVE_MEMBER_JOB_STATUS = (
        Host.API,
        "sharing/check_remove_member_job_status",
    )
    SHARING_CHECK_SHARE_JOB_STATUS = (Host.API, "sharing/check_share_job_status")
    SHARING_CREATE_SHARED_LINK_WITH_SETTINGS = (
        Host.API,
        "sharing/create_shared_link_with_settings",
    )
    SHARING_GET_FILE_METADATA = (Host.API, "sharing/get_file_metadata")
    SHARING_GET_FILE_METADATA_BATCH = (Host.API, "sharing/get_file_metadata/batch")
    SHARING_GET_FOLDER_METADATA = (Host.API, "sharing/get_folder_metadata")
    SHARING_GET_SHARED_LINK_FILE = (Host.CONTENT, "sharing/get_shared_link_file")
    SHARING_GET_SHARED_LINK_METADATA = (Host.API, "sharing/get_shared_link_metadata")
    SHARING_LIST_FILE_MEMBERS = (Host.API, "sharing/list_file_members")
    SHARING_LIST_FILE_MEMBERS_BATCH = (Host.API, "sharing/list_file_members/batch")
    SHARING_LIST_FILE_MEMBERS_CONTINUE = (
        Host.API,
        "sharing/list_file_members/continue",
    )
    SHARING_LIST_FOLDER_MEMBERS = (Host.API, "sharing/list_folder_members")
    SHARING_LIST_FOLDER_MEMBERS_CONTINUE = (
        Host.API,
        "sharing/list_folder_members/continue",
    )
    SHARING_LIST_FOLDERS = (Host.API, "sharing/list_folders")
    SHARING_LIST_FOLDERS_CONTINUE = (Host.API, "sharing/list_folders/continue")
    SHARING_LIST_MOUNTABLE_FOLDERS = (Host.API, "sharing/list_mountable_folders")
    SHARING_LIST_MOUNTABLE_FOLDERS_CONTINUE = (
        Host.API,
        "sharing/list_mountable_folders/continue",
    )
    SHARING_LIST_RECEIVED_FILES = (Host.API, "sharing/list_received_files")
    SHARING_LIST_RECEIVED_FILES_CONTINUE = (
        Host.API,
        "sharing/list_received_files/continue",
    )
    SHARING_LIST_SHARED_LINKS = (Host.API, "sharing/list_shared_links")
    SHARING_MODIFY_SHARED_LINK_SETTINGS = (
        Host.API,
        "sharing/modify_shared_link_settings",
    )
    SHARING_MOUNT_FOLDER = (Host.API, "sharing/mount_folder")
    SHARING_RELINQUISH_FILE_MEMBERSHIP = (Host.API, "sharing/relinquish_file_membership")
    SHARING_RELINQUISH_FOLDER_MEMBERSHIP = (
        Host.API,
        "sharing/relinquish_folder_membership",
    )
    SHARING_REMOVE_FILE_MEMBER_2 = (Host.API, "sharing/remove_file_member_2")
    SHARING_REMOVE_FOLDER_MEMBER = (Host.API, "sharing/remove_folder_member")
    SHARING_REVOKE_SHARED_LINK = (Host.API, "sharing/revoke_shared_link")
    SHARING_SET_ACCESS_INHERITANCE = (Host.API, "sharing/set_access_inheritance")
    SHARING_SHARE_FOLDER = (Host.API, "sharing/share_folder")
    SHARING_TRANSFER_FOLDER = (Host.API, "sharing/transfer_folder")
    SHARING_UNMOUNT_FOLDER = (Host.API, "sharing/unmount_folder")
    SHARING_UNSHARE_FILE = (Host.API, "sharing/unshare_file")
    SHARING_UNSHARE_FOLDER = (Host.API, "sharing/unshare_folder")
    SHARING_UPDATE_FILE_MEMBER = (Host.API, "sharing/update_file_member")
    SHARING_UPDATE_FOLDER_MEMBER = (Host.API, "sharing/update_folder_member")
    SHARING_UPDATE_FOLDER_POLICY = (Host.API, "sharing/update_folder_policy")

    # users
    USERS_FEATURES_GET_VALUES = (Host.API, "users/features/get_values")
    USERS_GET_ACCOUNT = (Host.API, "users/get_account")
    USERS_GET_ACCOUNT_BATCH = (Host.API, "users/get_account_batch")
    USERS_GET_CURRENT_ACCOUNT = (Host.API, "users/get_current_account")
    USERS_GET_SPACE_USAGE = (Host.API, "users/get_space_usage")

    @property
    def host(self) -> Host:
        return self.value[0]

    @property
    def path(self) -> str:
        return f"/{API_VERSION}/{self.value[1]}"

    @property
    def production_url(self) -> str:
        return f"https://{self.host.value}{self.path}"


@dataclass(frozen=True)
class EndpointResolution:
    """Production URL plus, in test mode, one override per transport mode."""

    url: str
    test_sync_url: Optional[str] = None
    test_async_url: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.test_sync_url is None) != (self.test_async_url is None):
            raise ValueError(
                "Test URLs must be provided for both transport modes or neither"
            )

    @property
    def is_test(self) -> bool:
        return self.test_sync_url is not None

    def for_mode(self, mode: TransportMode) -> str:
        """URL to dispatch to for the given mode, falling back to production."""
        if mode == TransportMode.TEST_SYNC and self.test_sync_url:
            return self.test_sync_url
        if mode == TransportMode.TEST_ASYNC and self.test_async_url:
            return self.test_async_url
        return self.url


def rewrite_for_test(url: str, host: str, port: int) -> str:
    """Move a production URL onto a loopback host, keeping path and query intact."""
    return str(httpx.URL(url).copy_with(scheme="http", host=host, port=port))


def get_endpoint_url(
    endpoint: Endpoint, settings: Optional[Settings] = None
) -> EndpointResolution:
    settings = settings or get_settings()
    url = endpoint.production_url

    if not settings.test_mode:
        return EndpointResolution(url=url)

    return EndpointResolution(
        url=url,
        test_sync_url=rewrite_for_test(
            url, settings.mock_sync_host, settings.mock_sync_port
        ),
        test_async_url=rewrite_for_test(
            url, settings.mock_async_host, settings.mock_async_port
        ),
    )


def resolve(
    endpoint: Endpoint,
    mode: TransportMode = TransportMode.PRODUCTION,
    settings: Optional[Settings] = None,
) -> str:
    """Resolve an endpoint to the URL used by the given transport mode."""
    settings = settings or get_settings()
    url = endpoint.production_url

    if mode == TransportMode.TEST_SYNC:
        return rewrite_for_test(url, settings.mock_sync_host, settings.mock_sync_port)
    if mode == TransportMode.TEST_ASYNC:
        return rewrite_for_test(
            url, settings.mock_async_host, settings.mock_async_port
        )
    return url


__all__ = [
    "API_VERSION",
    "Endpoint",
    "EndpointResolution",
    "Host",
    "TransportMode",
    "get_endpoint_url",
    "resolve",
    "rewrite_for_test",
]
