"""
Configuration management for the SDK.
"""

import logging
from typing import Optional

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = ConfigDict(env_file=".env", env_prefix="DROPBOX_API_")

    timeout: Optional[float] = 30.0
    user_agent: str = "dropbox-api-python/0.1"
    # Honour HTTP(S)_PROXY and NO_PROXY from the environment
    trust_env: bool = True

    # Loopback transports used instead of the production hosts in test mode
    test_mode: bool = False
    mock_sync_host: str = "127.0.0.1"
    mock_sync_port: int = 8002
    mock_async_host: str = "127.0.0.1"
    mock_async_port: int = 1420

    debug: bool = False
    log_level: str = "INFO"


def get_settings() -> Settings:
    return Settings()


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure logging for the SDK."""
    settings = settings or get_settings()
    level_name = "DEBUG" if settings.debug else settings.log_level
    level = getattr(logging, level_name.upper(), logging.INFO)

    logger = logging.getLogger("dropbox_api")
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(f"dropbox_api.{name}")
