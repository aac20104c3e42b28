"""
End-to-end calls in test mode against the loopback mock server.
"""

import asyncio
import json

import pytest

from dropbox_api.api.auth import TokenRevokeRequest
from dropbox_api.api.check import CheckAppRequest, CheckUserRequest
from dropbox_api.api.file_requests import GetFileRequestRequest
from dropbox_api.api.files import GetThumbnailBatchRequest, ListFolderLongpollRequest
from dropbox_api.clients import HttpClients
from dropbox_api.config import Settings
from dropbox_api.exceptions import DropboxError, ParsingError, RequestError
from dropbox_api.models.check import EchoArg
from dropbox_api.models.common import Void
from dropbox_api.models.file_requests import GetFileRequestArgs
from dropbox_api.models.files import (
    GetThumbnailBatchArg,
    ListFolderLongpollArg,
    ThumbnailArg,
)
from tests.test_server.server import get_free_port


FILE_REQUEST = {
    "created": "2015-10-05T17:00:00Z",
    "deadline": {
        "allow_late_uploads": {".tag": "seven_days"},
        "deadline": "2020-10-12T17:00:00Z",
    },
    "description": "Please submit your homework here.",
    "destination": "/File Requests/Homework",
    "file_count": 3,
    "id": "oaCAVmEyrqYnkZX9955Y",
    "is_open": True,
    "title": "Homework submission",
    "url": "https://www.dropbox.com/request/oaCAVmEyrqYnkZX9955Y",
}


def _settings(sync_port: int, async_port: int) -> Settings:
    return Settings(
        test_mode=True,
        trust_env=False,
        timeout=5.0,
        mock_sync_host="127.0.0.1",
        mock_sync_port=sync_port,
        mock_async_host="127.0.0.1",
        mock_async_port=async_port,
    )


@pytest.fixture
def clients(mock_dropbox):
    return HttpClients(_settings(mock_dropbox.sync_port, mock_dropbox.async_port))


@pytest.mark.integration
class TestMockServerSync:
    def test_check_app(self, mock_dropbox, clients):
        response = CheckAppRequest("token", EchoArg(query="foo")).call_sync(clients)

        assert response.payload.result == "foo"
        request = mock_dropbox.requests[0]
        assert request.port == mock_dropbox.sync_port
        assert request.path == "/2/check/app"
        assert request.headers["Authorization"] == "Bearer token"
        assert json.loads(request.body) == {"query": "foo"}
        clients.close()

    def test_check_user(self, clients):
        response = CheckUserRequest("token", EchoArg(query="bar")).call_sync(clients)

        assert response.payload.result == "bar"
        clients.close()

    def test_file_request(self, mock_dropbox, clients):
        mock_dropbox.route("/2/file_requests/get", 200, json.dumps(FILE_REQUEST))

        response = GetFileRequestRequest(
            "token", GetFileRequestArgs(id="oaCAVmEyrqYnkZX9955Y")
        ).call_sync(clients)

        assert response.payload.title == "Homework submission"
        assert response.payload.deadline.allow_late_uploads.tag == "seven_days"
        clients.close()

    def test_void_route(self, mock_dropbox, clients):
        response = TokenRevokeRequest("token").call_sync(clients)

        assert response.payload == Void(None)
        assert mock_dropbox.requests[0].body == b""
        clients.close()

    def test_empty_body(self, mock_dropbox, clients):
        mock_dropbox.route("/2/check/app", 200, "")

        assert CheckAppRequest("token", EchoArg(query="foo")).call_sync(clients) is None
        clients.close()

    def test_error_status(self, mock_dropbox, clients):
        mock_dropbox.route(
            "/2/file_requests/get",
            409,
            json.dumps(
                {
                    "error_summary": "not_found/..",
                    "error": {".tag": "not_found"},
                }
            ),
        )

        with pytest.raises(DropboxError) as exc_info:
            GetFileRequestRequest(
                "token", GetFileRequestArgs(id="missing")
            ).call_sync(clients)

        assert exc_info.value.status_code == 409
        assert exc_info.value.error_summary == "not_found/.."
        clients.close()

    def test_unknown_route(self, clients):
        with pytest.raises(DropboxError) as exc_info:
            GetFileRequestRequest(
                "token", GetFileRequestArgs(id="oaCAVmEyrqYnkZX9955Y")
            ).call_sync(clients)

        assert exc_info.value.status_code == 404
        clients.close()

    def test_malformed_body(self, mock_dropbox, clients):
        mock_dropbox.route("/2/check/app", 200, "{not json")

        with pytest.raises(ParsingError):
            CheckAppRequest("token", EchoArg(query="foo")).call_sync(clients)
        clients.close()

    def test_argument_header_with_control_characters(self, mock_dropbox, clients):
        mock_dropbox.route("/2/files/get_thumbnail_batch", 200, '{"entries": []}')
        payload = GetThumbnailBatchArg(entries=[ThumbnailArg(path="/caf\x7fé.jpg")])

        response = GetThumbnailBatchRequest("token", payload).call_sync(clients)

        assert response.payload.entries == []
        header = mock_dropbox.requests[0].headers["Dropbox-API-Arg"]
        assert json.loads(header)["entries"][0]["path"] == "/caf\x7fé.jpg"
        clients.close()


@pytest.mark.integration
class TestMockServerAsync:
    @pytest.mark.asyncio
    async def test_check_app(self, mock_dropbox, clients):
        response = await CheckAppRequest("token", EchoArg(query="foo")).call(clients)

        assert response.payload.result == "foo"
        assert mock_dropbox.requests[0].port == mock_dropbox.async_port
        await clients.aclose()

    @pytest.mark.asyncio
    async def test_notify_route(self, mock_dropbox, clients):
        response = await ListFolderLongpollRequest(
            "token",
            ListFolderLongpollArg(
                cursor="ZtkX9_EHj3x7PMkVuFIhwKYXEpwpLwyxp9vMKomUhllil9q7eWiAu"
            ),
        ).call(clients)

        assert response.payload.changes is True
        assert mock_dropbox.requests[0].path == "/2/files/list_folder/longpoll"
        await clients.aclose()

    @pytest.mark.asyncio
    async def test_both_modes_agree(self, mock_dropbox, clients):
        request = CheckAppRequest("token", EchoArg(query="same"))

        sync_response = request.call_sync(clients)
        async_response = await request.call(clients)

        assert sync_response == async_response
        ports = [recorded.port for recorded in mock_dropbox.requests]
        assert ports == [mock_dropbox.sync_port, mock_dropbox.async_port]
        await clients.aclose()


@pytest.mark.integration
class TestEventLoops:
    def test_clients_outlive_event_loop(self, mock_dropbox, clients):
        request = CheckAppRequest("token", EchoArg(query="foo"))

        async def call_once():
            return await request.call(clients)

        async def call_and_close():
            try:
                return await request.call(clients)
            finally:
                await clients.aclose()

        first = asyncio.run(call_once())
        second = asyncio.run(call_and_close())

        assert first == second
        assert first.payload.result == "foo"
        assert len(mock_dropbox.requests) == 2

    def test_new_loop_gets_new_client(self, mock_dropbox, clients):
        async def current_client():
            await CheckAppRequest("token", EchoArg(query="foo")).call(clients)
            return clients.async_client

        first = asyncio.run(current_client())
        second = asyncio.run(current_client())

        assert first is not second
        clients.close()


@pytest.mark.integration
class TestConnectionRefused:
    def test_sync(self):
        port = get_free_port()
        clients = HttpClients(_settings(port, port))

        with pytest.raises(RequestError) as exc_info:
            CheckAppRequest("token", EchoArg(query="foo")).call_sync(clients)

        assert exc_info.value.details["url"] == f"http://127.0.0.1:{port}/2/check/app"
        clients.close()

    @pytest.mark.asyncio
    async def test_async(self):
        port = get_free_port()
        clients = HttpClients(_settings(port, port))

        with pytest.raises(RequestError):
            await CheckAppRequest("token", EchoArg(query="foo")).call(clients)
        await clients.aclose()
