import pytest

from dropbox_api.clients import reset_default_clients
from dropbox_api.config import Settings


@pytest.fixture
def settings():
    return Settings(test_mode=False, timeout=5.0)


@pytest.fixture
def test_settings():
    return Settings(
        test_mode=True,
        mock_sync_host="127.0.0.1",
        mock_sync_port=8002,
        mock_async_host="127.0.0.1",
        mock_async_port=1420,
    )


@pytest.fixture
def mock_dropbox():
    from tests.test_server.server import MockDropboxServer

    with MockDropboxServer() as server:
        yield server


@pytest.fixture(autouse=True)
def _fresh_default_clients():
    yield
    reset_default_clients()
