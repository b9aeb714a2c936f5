# File: src/things_mcp/core/config.py
# Purpose: Environment-driven settings for the Things MCP server.
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Server settings, read from the environment and an optional ``.env``.

    ``THINGS_AUTH_TOKEN`` is read once here and handed to the tool registry;
    nothing else consults the environment at call time.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Server identity
    SERVER_NAME: str = "things-mcp"
    SERVER_VERSION: str = "0.2.0"

    # Things URL-scheme authorization (Things > Settings > General > Enable Things URLs)
    THINGS_AUTH_TOKEN: str = ""

    # Logging; stdout carries the protocol, so console logs go to stderr
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = ""

    # External commands
    OSASCRIPT_PATH: str = "osascript"
    OPEN_PATH: str = "open"
    COMMAND_TIMEOUT_S: Optional[float] = None

    @property
    def has_auth_token(self) -> bool:
        return bool(self.THINGS_AUTH_TOKEN.strip())


@lru_cache
def get_settings() -> Settings:
    return Settings()
