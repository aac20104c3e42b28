"""
Checks that run over every request type in ``dropbox_api.api``.
"""

import inspect

import pytest

from dropbox_api import api
from dropbox_api.endpoints import Host
from dropbox_api.endpoints.headers import CONTENT_TYPE_OCTET_STREAM, DROPBOX_API_ARG
from dropbox_api.service import ApiRequest
from tests.helpers.network import make_clients, recorded, respond


def _request_types():
    found = []
    for name in api.__all__:
        module = getattr(api, name)
        if not inspect.ismodule(module):
            continue
        for _, cls in inspect.getmembers(module, inspect.isclass):
            if (
                issubclass(cls, ApiRequest)
                and cls is not ApiRequest
                and cls.__module__ == module.__name__
            ):
                found.append(cls)
    return found


REQUEST_TYPES = _request_types()


def test_catalogue_found():
    assert len(REQUEST_TYPES) > 40


def test_each_endpoint_used_once():
    endpoints = [cls.operation.endpoint for cls in REQUEST_TYPES]
    assert len(endpoints) == len(set(endpoints))


def test_every_host_class_exercised():
    hosts = {cls.operation.endpoint.host for cls in REQUEST_TYPES}
    assert hosts == {Host.API, Host.CONTENT, Host.NOTIFY}


@pytest.mark.parametrize("request_type", REQUEST_TYPES, ids=lambda cls: cls.__name__)
def test_empty_body_is_none_sync(settings, request_type):
    clients = make_clients(respond(200, ""), settings)

    assert request_type("token").call_sync(clients) is None
    url = str(recorded(clients)[0].url)
    assert url == request_type.operation.endpoint.production_url


@pytest.mark.asyncio
@pytest.mark.parametrize("request_type", REQUEST_TYPES, ids=lambda cls: cls.__name__)
async def test_empty_body_is_none_async(settings, request_type):
    clients = make_clients(respond(200, ""), settings)

    assert await request_type("token").call(clients) is None
    await clients.aclose()


@pytest.mark.parametrize("request_type", REQUEST_TYPES, ids=lambda cls: cls.__name__)
def test_content_host_takes_argument_header(request_type):
    """Content-host and paper routes carry their argument in Dropbox-API-Arg."""
    operation = request_type.operation
    if (
        operation.endpoint.host == Host.CONTENT
        or CONTENT_TYPE_OCTET_STREAM in operation.headers
    ):
        assert DROPBOX_API_ARG in operation.headers
    else:
        assert DROPBOX_API_ARG not in operation.headers
