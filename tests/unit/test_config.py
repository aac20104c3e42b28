import logging

import pytest

from dropbox_api.config import Settings, get_logger, get_settings, setup_logging


class TestSettings:
    def test_default_values(self, monkeypatch):
        """Test default configuration values"""
        for name in ("TIMEOUT", "TEST_MODE", "DEBUG", "LOG_LEVEL"):
            monkeypatch.delenv(f"DROPBOX_API_{name}", raising=False)

        settings = Settings()

        assert settings.timeout == 30.0
        assert settings.trust_env is True
        assert settings.test_mode is False
        assert settings.mock_sync_host == "127.0.0.1"
        assert settings.mock_sync_port == 8002
        assert settings.mock_async_host == "127.0.0.1"
        assert settings.mock_async_port == 1420
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.user_agent

    def test_custom_values(self):
        """Test settings with custom values"""
        settings = Settings(
            timeout=None,
            test_mode=True,
            mock_sync_port=9000,
            mock_async_port=9001,
        )

        assert settings.timeout is None
        assert settings.test_mode is True
        assert settings.mock_sync_port == 9000
        assert settings.mock_async_port == 9001

    def test_environment_variables(self, monkeypatch):
        """Test loading from prefixed environment variables"""
        monkeypatch.setenv("DROPBOX_API_TIMEOUT", "12.5")
        monkeypatch.setenv("DROPBOX_API_TEST_MODE", "true")
        monkeypatch.setenv("DROPBOX_API_MOCK_SYNC_PORT", "18002")

        settings = Settings()

        assert settings.timeout == 12.5
        assert settings.test_mode is True
        assert settings.mock_sync_port == 18002

    def test_unprefixed_variables_ignored(self, monkeypatch):
        monkeypatch.delenv("DROPBOX_API_TEST_MODE", raising=False)
        monkeypatch.setenv("TEST_MODE", "true")

        assert Settings().test_mode is False

    def test_invalid_port_rejected(self):
        with pytest.raises(ValueError):
            Settings(mock_sync_port="not-a-port")

    def test_get_settings_returns_fresh_instance(self):
        assert isinstance(get_settings(), Settings)
        assert get_settings() is not get_settings()


class TestLogging:
    @pytest.fixture
    def sdk_logger(self):
        logger = logging.getLogger("dropbox_api")
        handlers = list(logger.handlers)
        level = logger.level
        yield logger
        logger.handlers = handlers
        logger.setLevel(level)

    def test_get_logger_namespaced(self):
        assert get_logger("engine").name == "dropbox_api.engine"

    def test_setup_logging_level(self, sdk_logger):
        setup_logging(Settings(log_level="WARNING", debug=False))

        assert sdk_logger.level == logging.WARNING

    def test_setup_logging_debug_overrides_level(self, sdk_logger):
        setup_logging(Settings(log_level="ERROR", debug=True))

        assert sdk_logger.level == logging.DEBUG

    def test_setup_logging_installs_handler_once(self, sdk_logger):
        sdk_logger.handlers = []

        setup_logging(Settings())
        setup_logging(Settings())

        assert len(sdk_logger.handlers) == 1
