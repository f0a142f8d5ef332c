"""Configuration management for Pushest."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .types import ConnectionState
from .version import __version__

if TYPE_CHECKING:
    from .url import EndpointDescriptor


class ClientInfo(BaseModel):
    """Protocol and client identification sent in the connection URL."""

    model_config = ConfigDict(frozen=True)

    protocol_version: int = Field(default=7, description="Pusher protocol version")
    client_name: str = Field(default="pushest", description="Client identifier")
    client_version: str = Field(default=__version__, description="Client version")


class PushestConfig(BaseSettings):
    """
    Configuration for a Pushest application.

    Values are loaded from (in order of precedence):
    1. Constructor arguments
    2. Environment variables (prefixed with PUSHEST_)
    3. .env file
    4. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="PUSHEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Required settings
    app_key: str = Field(..., description="Pusher application key")
    app_secret: SecretStr = Field(..., description="Pusher application secret")

    # Optional settings with defaults
    cluster: str = Field(default="mt1", description="Pusher cluster name")
    encrypted: bool = Field(default=True, description="Use TLS (port 443) instead of port 80")

    # Protocol settings
    client: ClientInfo = Field(default_factory=ClientInfo)

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    def endpoint(self) -> EndpointDescriptor:
        """Construct the endpoint the transport should dial."""
        from .url import build_endpoint

        return build_endpoint(self)

    def connection_state(self, socket_id: str | None = None) -> ConnectionState:
        """Snapshot of credentials and the current socket ID for signing."""
        return ConnectionState(
            app_key=self.app_key,
            app_secret=self.app_secret.get_secret_value(),
            socket_id=socket_id,
        )

    def configure_logging(self) -> None:
        """Apply ``log_level`` to the root logger."""
        logging.basicConfig(level=getattr(logging, self.log_level))
