import asyncio
import dataclasses

import pytest

from dropbox_api.api.auth import TokenRevokeRequest
from dropbox_api.api.check import CheckAppRequest
from dropbox_api.api.file_requests import CreateFileRequestRequest
from dropbox_api.api.users import GetCurrentAccountRequest
from dropbox_api.clients import default_clients
from dropbox_api.core import ApiResponse
from dropbox_api.exceptions import RequestError
from dropbox_api.models.check import EchoArg, EchoResult
from dropbox_api.models.common import Void
from dropbox_api.models.file_requests import CreateFileRequestArgs
from tests.helpers.network import make_clients, recorded, respond


class TestApiRequest:
    def test_check_app_scenario(self, settings):
        clients = make_clients(respond(200, '{"result": "foo"}'), settings)

        response = CheckAppRequest("t", EchoArg(query="foo")).call_sync(clients)

        assert response == ApiResponse(payload=EchoResult(result="foo"))

    def test_dict_payload_validated(self):
        request = CreateFileRequestRequest(
            "token",
            {"title": "Homework submission", "destination": "/File Requests/Homework"},
        )

        assert isinstance(request.payload, CreateFileRequestArgs)
        assert request.payload.open is True

    def test_wrong_payload_type_rejected(self):
        with pytest.raises(TypeError):
            CreateFileRequestRequest("token", EchoArg(query="foo"))

    @pytest.mark.parametrize(
        "payload", [{"unexpected": 1}, EchoArg(query="foo")], ids=["dict", "model"]
    )
    def test_argumentless_operation_rejects_payload(self, payload):
        with pytest.raises(TypeError) as exc_info:
            GetCurrentAccountRequest("token", payload)

        assert "takes no payload" in str(exc_info.value)

    def test_argumentless_operation_dispatches_without_body(self, settings):
        clients = make_clients(respond(200, ""), settings)

        assert GetCurrentAccountRequest("token").call_sync(clients) is None
        assert recorded(clients)[0].content == b""

    def test_invalid_dict_payload_rejected(self):
        with pytest.raises(ValueError):
            CreateFileRequestRequest("token", {"title": "missing destination"})

    def test_payload_optional(self):
        assert CheckAppRequest("token").payload is None

    def test_immutable(self):
        request = CheckAppRequest("token", EchoArg(query="foo"))

        with pytest.raises(dataclasses.FrozenInstanceError):
            request.access_token = "other"

    def test_token_hidden_from_repr(self):
        assert "secret-token" not in repr(CheckAppRequest("secret-token"))

    def test_void_result(self, settings):
        clients = make_clients(respond(200, "null"), settings)

        response = TokenRevokeRequest("token").call_sync(clients)

        assert response == ApiResponse(payload=Void(None))
        assert recorded(clients)[0].content == b""

    def test_request_reusable(self, settings):
        clients = make_clients(respond(200, '{"result": "foo"}'), settings)
        request = CheckAppRequest("token", EchoArg(query="foo"))

        first = request.call_sync(clients)
        second = request.call_sync(clients)

        assert first == second
        assert len(recorded(clients)) == 2

    def test_default_clients_used(self, monkeypatch):
        clients = make_clients(respond(200, ""))
        monkeypatch.setattr("dropbox_api.service.default_clients", lambda: clients)

        assert CheckAppRequest("token").call_sync() is None
        assert len(recorded(clients)) == 1


class TestCall:
    def test_call_requires_running_loop(self):
        with pytest.raises(RequestError) as exc_info:
            CheckAppRequest("token").call()

        assert "running event loop" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_call_returns_task(self, settings):
        clients = make_clients(respond(200, '{"result": "foo"}'), settings)

        task = CheckAppRequest("token", EchoArg(query="foo")).call(clients)

        assert isinstance(task, asyncio.Task)
        response = await task
        assert response.payload.result == "foo"
        await clients.aclose()

    @pytest.mark.asyncio
    async def test_concurrent_calls(self, settings):
        clients = make_clients(respond(200, '{"result": "foo"}'), settings)

        tasks = [
            CheckAppRequest("token", EchoArg(query="foo")).call(clients)
            for _ in range(5)
        ]
        results = await asyncio.gather(*tasks)

        assert all(result.payload.result == "foo" for result in results)
        assert len(recorded(clients, asynchronous=True)) == 5
        await clients.aclose()


def test_default_clients_is_shared():
    assert default_clients() is default_clients()
